from Cython.Build import cythonize
from setuptools import setup, Extension
import numpy as np


extensions = [
    Extension(
        name="strobemers.hashing.hash",         # full dotted module path
        sources=["strobemers/hashing/hash.py"],
        include_dirs=[np.get_include()],
    ),
    Extension(
        name="strobemers.seed.window",
        sources=["strobemers/seed/window.py"],
        include_dirs=[np.get_include()],
    ),
]

setup(
    ext_modules=cythonize(
        extensions,
        compiler_directives={
            "language_level": "3",
            # annotations are documentation only, keep Python semantics
            "annotation_typing": False,
        },
    ),
    zip_safe=False,
)
