"""
ABI properties

Primitive type layout and pass-mode overrides. Some widths are assumed and
not stored: `char` is 8 bits, `short` is 16 bits, `float` and `double` are
IEEE754 binary32 and binary64.
"""

from dataclasses import dataclass, fields, replace
from typing import Optional

from ..common.enum import NamedEnum
from ..exceptions import DatabaseError


class ByteOrder(NamedEnum):
    """Byte order of multi-byte primitives in memory"""
    LITTLE = "little"
    BIG = "big"


class PointerKind(NamedEnum):
    """Near pointers use the short width, far pointers the long width"""
    NEAR = "near"
    FAR = "far"


class PassModeOverride(NamedEnum):
    """How a type is lowered at an ABI boundary"""
    INT = "int"
    MEMORY = "memory"


@dataclass(frozen=True)
class FloatFormat:
    """Format of C `long double`

    `ibm128` is the double-double pair format of legacy powerpc; otherwise
    the format is IEEE754-like with the given exponent and mantissa bits.
    """
    exp_bits: int = 0
    mant_bits: int = 0
    repr_int_bit: bool = False
    ibm128: bool = False

    def __post_init__(self):
        if not self.ibm128 and (self.exp_bits <= 0 or self.mant_bits <= 0):
            raise DatabaseError(f"float format needs non-zero exponent and mantissa: {self}")

    @property
    def total_bits(self) -> int:
        if self.ibm128:
            return 128
        return 1 + self.exp_bits + self.mant_bits + int(self.repr_int_bit)


IEEE754_DOUBLE = FloatFormat(exp_bits=11, mant_bits=52)
X87_DOUBLE_EXTENDED = FloatFormat(exp_bits=15, mant_bits=63, repr_int_bit=True)
IEEE754_QUAD = FloatFormat(exp_bits=15, mant_bits=112)
IBM128 = FloatFormat(ibm128=True)


def _is_width(value: int) -> bool:
    return value >= 8 and value & (value - 1) == 0


@dataclass(frozen=True)
class IntLayout:
    """Widths (in bits) of the integer and pointer types, plus byte order"""
    int_width: int
    long_width: int
    llong_width: int
    size_width: int
    short_pointer_width: int
    long_pointer_width: int
    intmax_width: int = 64
    data_pointer_kind: PointerKind = PointerKind.NEAR
    fn_pointer_kind: PointerKind = PointerKind.NEAR
    byte_order: ByteOrder = ByteOrder.LITTLE

    def __post_init__(self):
        for f in fields(self):
            if f.name.endswith("_width"):
                value = getattr(self, f.name)
                if not _is_width(value):
                    raise DatabaseError(f"{f.name} must be a power of two >= 8, got {value}")

        if self.intmax_width < self.llong_width:
            raise DatabaseError("intmax_width must be at least llong_width")

    def pointer_width(self, kind: PointerKind) -> int:
        if kind is PointerKind.FAR:
            return self.long_pointer_width
        return self.short_pointer_width

    @property
    def data_pointer_width(self) -> int:
        return self.pointer_width(self.data_pointer_kind)

    @property
    def fn_pointer_width(self) -> int:
        return self.pointer_width(self.fn_pointer_kind)

    @property
    def is_split_pointer(self) -> bool:
        return self.short_pointer_width != self.long_pointer_width


LE_IP16 = IntLayout(
    int_width=16,
    long_width=32,
    llong_width=64,
    size_width=16,
    short_pointer_width=16,
    long_pointer_width=16,
)
LE_LP32 = replace(LE_IP16, short_pointer_width=32, long_pointer_width=32)
LE_ILP32 = replace(LE_LP32, int_width=32, size_width=32)
LE_LLP64 = replace(LE_ILP32, size_width=64, short_pointer_width=64, long_pointer_width=64)
LE_LP64 = replace(LE_LLP64, long_width=64)

# Segmented x86-16: near pointers by default, or far pointers by default
LE_IP16_NEAR_FAR = replace(LE_IP16, long_pointer_width=32)
LE_LP32_NEAR_FAR = replace(
    LE_LP32,
    short_pointer_width=16,
    data_pointer_kind=PointerKind.FAR,
    fn_pointer_kind=PointerKind.FAR,
)

BE_IP16 = replace(LE_IP16, byte_order=ByteOrder.BIG)
BE_LP32 = replace(LE_LP32, byte_order=ByteOrder.BIG)
BE_ILP32 = replace(LE_ILP32, byte_order=ByteOrder.BIG)
BE_LLP64 = replace(LE_LLP64, byte_order=ByteOrder.BIG)
BE_LP64 = replace(LE_LP64, byte_order=ByteOrder.BIG)
BE_IP16_NEAR_FAR = replace(LE_IP16_NEAR_FAR, byte_order=ByteOrder.BIG)
BE_LP32_NEAR_FAR = replace(LE_LP32_NEAR_FAR, byte_order=ByteOrder.BIG)


@dataclass(frozen=True)
class PrimitiveLayout:
    """Layout of primitive types"""
    int_layout: IntLayout
    max_int_align: int
    max_bit_int_align: int
    max_simd_align: int
    ldouble_align: int
    ldouble_format: FloatFormat

    @property
    def byte_order(self) -> ByteOrder:
        return self.int_layout.byte_order


@dataclass(frozen=True)
class AbiProfile:
    """Pass-mode overrides for floating-point and vector types"""
    float_pass_override: Optional[PassModeOverride] = None
    simd_pass_override: Optional[PassModeOverride] = None

    @property
    def is_softfloat(self) -> bool:
        return self.float_pass_override is not None
