"""Clever-ISA"""

from ...properties.abi import IEEE754_QUAD, LE_LP64, PrimitiveLayout
from ...properties.arch import Architecture, AsmSpec, FeatureVocabulary, Machine

CLEVER_FEATURES = FeatureVocabulary([
    "main",
    "float",
    ("float-ext", ("float",)),
    "vector",
    "rand",
    ("int128", ("vector",)),
    ("float128", ("vector", "float")),
    "atomic-xchg",
    "hash-accel",
    ("crypto", ("vector",)),
])

CLEVER_MACHINES = (
    Machine("clever", ("main",)),
    Machine("clever1.0f", ("main", "float", "vector", "rand")),
)

CLEVER_ASM = AsmSpec("clever")

CLEVER = Architecture(
    name="clever",
    machines=CLEVER_MACHINES,
    default_machine=CLEVER_MACHINES[0],
    raw_width=64,
    features=CLEVER_FEATURES,
    call_tags=("C",),
    properties=(("rust.abi.rustcall.vector-pass-indirect", False),),
    asm=CLEVER_ASM,
)

CLEVER_PRIMITIVES = PrimitiveLayout(
    int_layout=LE_LP64,
    max_int_align=16,
    max_bit_int_align=16,
    max_simd_align=16,
    ldouble_align=16,
    ldouble_format=IEEE754_QUAD,
)
