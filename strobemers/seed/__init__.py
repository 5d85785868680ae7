from strobemers.seed.base import StrobeIterator  # noqa: F401
from strobemers.seed.factory import StrobeMethod, build_strobes  # noqa: F401
from strobemers.seed.minstrobes import MinStrobes  # noqa: F401
from strobemers.seed.randstrobes import RandStrobes  # noqa: F401
from strobemers.seed.window import sliding_min  # noqa: F401
