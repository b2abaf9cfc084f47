"""
x86 architectures: 16-bit, 32-bit and x86-64 microarchitecture levels

Machine lists nest: 16-bit architectures accept every x86 machine, 32-bit
architectures accept 32- and 64-bit machines, x86-64 only 64-bit machines.
"""

from ...properties.abi import (
    IEEE754_DOUBLE,
    LE_ILP32,
    LE_IP16,
    LE_IP16_NEAR_FAR,
    LE_LLP64,
    LE_LP32_NEAR_FAR,
    LE_LP64,
    PrimitiveLayout,
    X87_DOUBLE_EXTENDED,
)
from ...properties.arch import Architecture, AsmSpec, FeatureVocabulary, Machine

_SSE4 = ("x87", "sse", "sse2", "sse3", "ssse3", "sse4", "xsave")
_AVX = _SSE4 + ("avx",)
_AVX2 = _AVX + ("avx2",)
_AVX512 = _AVX2 + ("avx512f",)

X86_FEATURES = FeatureVocabulary([
    "x87",
    ("mmx", ("x87",)),
    ("sse", ("x87", "fxsr")),
    ("sse2", ("x87", "sse")),
    ("sse3", ("x87", "sse", "sse2")),
    ("ssse3", ("x87", "sse", "sse2", "sse3")),
    ("sse4.1", ("x87", "sse", "sse2", "sse3", "ssse3")),
    ("sse4.2", ("x87", "sse", "sse2", "sse3", "ssse3")),
    ("sse4", ("x87", "sse", "sse2", "sse3", "ssse3", "sse4.1", "sse4.2")),
    ("sse4a", ("x87", "sse", "sse2", "sse3", "ssse3")),
    ("avx", _SSE4),
    ("avx2", _AVX),
    ("avx512f", _AVX2),
    ("avx512bw", _AVX512),
    ("avx512cd", _AVX512),
    ("avx512vl", _AVX512),
    ("avx512dq", _AVX512),
    ("avx512ifma", _AVX512),
    ("avx512vbmi", _AVX512),
    ("avx512vpopcntdq", _AVX512),
    ("avx512vp2intersect", _AVX512),
    ("avx512vnni", _AVX512),
    ("avx512vbmi2", _AVX512),
    ("avx512bf16", _AVX512),
    ("avx512fp16", _AVX512),
    ("avx512bitalg", _AVX512),
    ("avx512bmm", _AVX512),
    ("avxvnni", _AVX),
    ("avxifma", _AVX),
    ("avxvnniint8", _AVX),
    ("avxneconvert", _AVX),
    ("avxvnniint16", _AVX),
    ("avx10.1", _AVX2),
    ("avx10.2", _AVX2 + ("avx10.1",)),
    ("sha", ("fxsr", "xsave", "avx")),
    ("aes", ("xsave", "avx")),
    "pclmul",
    "clflushopt",
    "clwb",
    ("fsgsbase", ("fsgs",)),
    "ptwrite",
    "rdrnd",
    "f16c",
    "fma",
    "fma4",
    "pconfig",
    "wbnoinvd",
    "prfchw",
    "rdpid",
    "rdseed",
    "sgx",
    "xop",
    "3dnow",
    "3dnowa",
    "abm",
    "adx",
    "bmi",
    "bmi1",
    "bmi2",
    "lzcnt",
    "popcnt",
    "cmov",
    ("fxsr", ("x87",)),
    ("xsave", ("fxsr",)),
    ("xsaveopt", ("fxsr", "xsave")),
    ("xsavec", ("fxsr", "xsave")),
    ("xsaves", ("fxsr", "xsave")),
    "rtm",
    "hle",
    "tbm",
    "mwaitx",
    "clzero",
    "pku",
    "gfni",
    ("vaes", ("xsave", "avx")),
    "waitpkg",
    "vpclmulqdq",
    "movdiri",
    "movdir64b",
    "uintr",
    "tsxldtrk",
    "cldemote",
    "serialize",
    ("amx-tile", ("fxsr", "xsave")),
    ("amx-int8", ("fxsr", "xsave", "amx-tile")),
    ("amx-bf16", ("fxsr", "xsave", "amx-tile")),
    "hreset",
    ("kl", ("fxsr", "sse2")),
    ("widekl", ("fxsr", "xsave", "avx")),
    "cmpccxadd",
    ("amx-fp16", ("fxsr", "xsave", "amx-tile")),
    "prefetchi",
    "raoint",
    ("amx-complex", ("fxsr", "xsave", "amx-tile")),
    ("sm3", ("fxsr", "xsave", "sse2", "avx")),
    ("sm4", ("fxsr", "xsave", "sse2", "avx")),
    ("sha512", ("fxsr", "xsave", "sse2", "avx")),
    ("apxf", ("fxsr", "xsave")),
    "usermsr",
    ("amx-avx512", ("fxsr", "xsave", "amx-tile", "avx10.1")),
    ("amx-tf32", ("fxsr", "xsave", "amx-tile")),
    ("amx-fp8", ("fxsr", "xsave", "amx-tile")),
    "movrs",
    "amx-movrs",
    ("cx16", ("cx",)),
    ("cx8", ("cx",)),
    "cx",
    "sahf",
    "movbe",
    "shstk",
    "crc32",
    "mwait",
    "fsgs",
])


def _machines(*entries):
    return tuple(Machine(name, features) for name, features in entries)


_P6 = ("x87", "cx", "cx8")
_X86_64_BASE = ("cx8", "cmov", "x87", "mmx", "sse", "sse2", "fxsr", "cx", "fsgs")
_X86_64_V2 = _X86_64_BASE + ("cx16", "sahf", "popcnt", "ssse3", "sse4.1", "sse4.2")
_X86_64_V3 = _X86_64_V2 + ("avx", "avx2", "bmi1", "bmi2", "f16c", "abm", "movbe", "xsave")
_X86_64_V4 = _X86_64_V3 + ("avx512f", "avx512bw", "avx512cd", "avx512dq", "avx512vl")

_MACHINES_16 = _machines(
    ("8086", ("x87",)),
    ("80286", ("x87",)),
)

_MACHINES_32 = _machines(
    ("i386", ("x87", "fsgs")),
    ("i486", ("x87", "fsgs", "cx")),
    ("i586", _P6),
    ("pentium", _P6),
    ("lakemont", _P6),
    ("pentium-mmx", _P6 + ("mmx",)),
    ("pentiumpro", _P6),
    ("i686", _P6),
    ("pentium2", _P6 + ("mmx", "fxsr")),
    ("pentium3", _P6 + ("mmx", "fxsr", "sse")),
    ("pentium3m", _P6 + ("mmx", "fxsr", "sse")),
    ("pentium-m", _P6 + ("mmx", "fxsr", "sse", "sse2")),
    ("pentium4", _P6 + ("cmov", "mmx", "fxsr", "sse", "sse2")),
    ("prescott", _P6 + ("cmov", "mmx", "fxsr", "sse", "sse2", "sse3")),
    ("k6", _P6 + ("mmx",)),
    ("k6-2", _P6 + ("mmx", "3dnow")),
    ("k6-3", _P6 + ("mmx", "3dnow")),
    ("athlon", _P6 + ("mmx", "3dnow", "3dnowa")),
    ("athlon-tbird", _P6 + ("mmx", "3dnow", "3dnowa")),
    ("athlon-4", _P6 + ("mmx", "3dnow", "3dnowa", "sse")),
    ("athlon-xp", _P6 + ("mmx", "3dnow", "3dnowa", "sse")),
    ("athlon-mp", _P6 + ("mmx", "3dnow", "3dnowa", "sse")),
)

_MACHINES_64 = _machines(
    ("x86-64", _X86_64_BASE),
    ("x86-64v2", _X86_64_V2),
    ("x86-64v3", _X86_64_V3),
    ("x86-64v4", _X86_64_V4),
    ("nocona", _X86_64_BASE + ("sse3",)),
    ("core2", _X86_64_BASE + ("sse3", "ssse3", "cx16", "sahf")),
)

X86_16_MACHINES = _MACHINES_16 + _MACHINES_32 + _MACHINES_64
X86_32_MACHINES = _MACHINES_32 + _MACHINES_64
X86_64_MACHINES = _MACHINES_64

X86_16_TAGS = ("cdecl", "pascal", "fastcall-ms", "fastcall-turbo", "watcall")
X86_32_TAGS = (
    "cdecl-ms", "cdecl-unix",
    "stdcall-ms", "stdcall-unix",
    "fastcall-ms", "fastcall-unix",
    "thiscall-ms", "thiscall-unix",
    "register",
    "vectorcall-ms", "vectorcall-unix",
    "watcall",
)
X86_64_TAGS = ("sysv64", "win64", "vectorcall")

X86_16_ASM = AsmSpec("x86-16")
X86_32_ASM = AsmSpec("x86-32")
X86_64_ASM = AsmSpec("x86-64")

_BASES = {
    16: (X86_16_MACHINES, X86_16_TAGS, X86_16_ASM),
    32: (X86_32_MACHINES, X86_32_TAGS, X86_32_ASM),
    64: (X86_64_MACHINES, X86_64_TAGS, X86_64_ASM),
}


def _x86_arch(name, width, default_machine, aliases=()):
    machines, tags, asm = _BASES[width]
    return Architecture(
        name=name,
        aliases=("x86",) + tuple(aliases),
        machines=machines,
        default_machine=next(m for m in machines if m.name == default_machine),
        raw_width=width,
        features=X86_FEATURES,
        call_tags=tags,
        asm=asm,
    )


_X86_64_ALIASES = ("amd64", "x64_64", "intel64")

A8086 = _x86_arch("8086", 16, "8086")
I286 = _x86_arch("i286", 16, "80286")
I386 = _x86_arch("i386", 32, "i386")
I486 = _x86_arch("i486", 32, "i486")
I586 = _x86_arch("i586", 32, "i586")
I686 = _x86_arch("i686", 32, "i686")
I786 = _x86_arch("i786", 32, "pentium4")
X86_64 = _x86_arch("x86-64", 64, "x86-64", _X86_64_ALIASES)
X86_64_V2 = _x86_arch("x86-64v2", 64, "x86-64v2", _X86_64_ALIASES + ("x86-64",))
X86_64_V3 = _x86_arch("x86-64v3", 64, "x86-64v3", _X86_64_ALIASES + ("x86-64",))
X86_64_V4 = _x86_arch("x86-64v4", 64, "x86-64v4", _X86_64_ALIASES + ("x86-64",))


# x86-16 flat memory model
X86_16_FLAT = PrimitiveLayout(
    int_layout=LE_IP16,
    max_int_align=2,
    max_bit_int_align=2,
    max_simd_align=16,
    ldouble_align=2,
    ldouble_format=X87_DOUBLE_EXTENDED,
)

# segmented, near pointers by default (ss == ds)
X86_16_NEAR = PrimitiveLayout(
    int_layout=LE_IP16_NEAR_FAR,
    max_int_align=2,
    max_bit_int_align=2,
    max_simd_align=16,
    ldouble_align=2,
    ldouble_format=X87_DOUBLE_EXTENDED,
)

# segmented, far pointers by default
X86_16_FAR = PrimitiveLayout(
    int_layout=LE_LP32_NEAR_FAR,
    max_int_align=2,
    max_bit_int_align=2,
    max_simd_align=16,
    ldouble_align=2,
    ldouble_format=X87_DOUBLE_EXTENDED,
)

X86_32_PRIMITIVES = PrimitiveLayout(
    int_layout=LE_ILP32,
    max_int_align=4,
    max_bit_int_align=4,
    max_simd_align=64,
    ldouble_align=4,
    ldouble_format=X87_DOUBLE_EXTENDED,
)

X86_32_PRIMITIVES_MSVC = PrimitiveLayout(
    int_layout=LE_ILP32,
    max_int_align=8,
    max_bit_int_align=8,
    max_simd_align=64,
    ldouble_align=8,
    ldouble_format=IEEE754_DOUBLE,
)

X86_64_PRIMITIVES_SYSV = PrimitiveLayout(
    int_layout=LE_LP64,
    max_int_align=16,
    max_bit_int_align=8,
    max_simd_align=64,
    ldouble_align=16,
    ldouble_format=X87_DOUBLE_EXTENDED,
)

X86_64_PRIMITIVES_WIN64 = PrimitiveLayout(
    int_layout=LE_LLP64,
    max_int_align=16,
    max_bit_int_align=8,
    max_simd_align=64,
    ldouble_align=8,
    ldouble_format=IEEE754_DOUBLE,
)

# x86-64 ILP32 (x32)
X32_PRIMITIVES = PrimitiveLayout(
    int_layout=LE_ILP32,
    max_int_align=16,
    max_bit_int_align=8,
    max_simd_align=64,
    ldouble_align=16,
    ldouble_format=X87_DOUBLE_EXTENDED,
)

X86_64_F64_LONG_DOUBLE = PrimitiveLayout(
    int_layout=LE_LP64,
    max_int_align=16,
    max_bit_int_align=8,
    max_simd_align=64,
    ldouble_align=8,
    ldouble_format=IEEE754_DOUBLE,
)
