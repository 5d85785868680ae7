# default parameters
DEFAULT_ORDER = 2
DEFAULT_STROBE_LENGTH = 15
DEFAULT_W_MIN = 16
DEFAULT_W_MAX = 30

# default mask for the masked combination (2^20 - 1)
DEFAULT_PRIME_NUMBER = (1 << 20) - 1
# set_prime refuses anything below this
MIN_PRIME_NUMBER = 256

SUPPORTED_ORDERS = (2, 3)
MAX_STROBE_LENGTH = 64

U64_MASK = (1 << 64) - 1
U64_MAX = U64_MASK

ASCII_SIZE = 256
INVALID_NT4 = 4


def _build_complement_table() -> bytes:
    table = bytearray(b'N' * ASCII_SIZE)
    for base, comp in zip(b'ACGTacgtUu', b'TGCATGCAAA'):
        table[base] = comp
    return bytes(table)


def _build_nt4_table() -> bytes:
    table = bytearray([INVALID_NT4] * ASCII_SIZE)
    for bases, code in ((b'Aa', 0), (b'Cc', 1), (b'Gg', 2), (b'TtUu', 3)):
        for base in bases:
            table[base] = code
    return bytes(table)


# complement lookup: A<->T, C<->G (either case), U -> A, everything else -> N
COMPL_BASES = _build_complement_table()

# 2-bit encoding: A=0, C=1, G=2, T/U=3, anything else=4
SEQ_NT4_TABLE = _build_nt4_table()

# per-base 64-bit seeds of the rotate-xor rolling hash, indexed by nt4 code;
# unknown bases contribute nothing
NT_SEED_A = 0x3C8BFBB395C60474
NT_SEED_C = 0x3193C18562A02B4C
NT_SEED_G = 0x20323ED082572324
NT_SEED_T = 0x295549F54BE24456
NT_SEEDS = (NT_SEED_A, NT_SEED_C, NT_SEED_G, NT_SEED_T, 0)
