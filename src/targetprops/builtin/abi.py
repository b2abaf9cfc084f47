"""Builtin ABI profiles and primitive layouts"""

from ..properties.abi import AbiProfile, PassModeOverride
from ..resolver.match import RuleTable, when
from ..triple import ArchFamily, EnvId, ObjectFormat, OsId
from .archs import clever, x86

ABI_HARDFLOAT = AbiProfile()
ABI_SOFTFLOAT = AbiProfile(
    float_pass_override=PassModeOverride.INT,
    simd_pass_override=PassModeOverride.INT,
)

_ARM = (ArchFamily.ARM, ArchFamily.ARM_BE)

ABI_RULES = RuleTable("abi", [
    (when(arch=ArchFamily.X86_64), ABI_HARDFLOAT),
    (when(arch=ArchFamily.CLEVER), ABI_HARDFLOAT),
    (when(arch=ArchFamily.HOLEYBYTES), ABI_HARDFLOAT),
    (when(arch=(ArchFamily.X86_32, ArchFamily.X86_16)), ABI_HARDFLOAT),
    (when(arch=_ARM, os=(OsId.LINUX, OsId.LILIUM, OsId.WIN32, OsId.MACOSX)), ABI_HARDFLOAT),
    (when(arch=_ARM, env=(EnvId.GNUEABIHF, EnvId.EABIHF)), ABI_HARDFLOAT),
    (when(arch=_ARM, env=(EnvId.GNUEABI, EnvId.EABI)), ABI_SOFTFLOAT),
])

_SYSV_OSES = (OsId.LINUX, OsId.FREEBSD, OsId.OPENBSD, OsId.NETBSD, OsId.FUCHSIA)

LAYOUT_RULES = RuleTable("primitive layout", [
    (when(arch=ArchFamily.X86_64, os=OsId.LINUX, env=EnvId.GNUX32), x86.X32_PRIMITIVES),
    (when(arch=ArchFamily.X86_64, os=_SYSV_OSES), x86.X86_64_PRIMITIVES_SYSV),
    (when(arch=ArchFamily.X86_64, os=OsId.LILIUM), x86.X86_64_F64_LONG_DOUBLE),
    (when(arch=ArchFamily.X86_64, os=OsId.WIN32), x86.X86_64_PRIMITIVES_WIN64),
    (when(arch=ArchFamily.X86_64, objfmt=ObjectFormat.ELF), x86.X86_64_PRIMITIVES_SYSV),
    (when(arch=ArchFamily.X86_32, os=OsId.WIN32), x86.X86_32_PRIMITIVES_MSVC),
    (when(arch=ArchFamily.X86_32), x86.X86_32_PRIMITIVES),
    (when(arch=ArchFamily.X86_16), x86.X86_16_FLAT),
    (when(arch=ArchFamily.CLEVER), clever.CLEVER_PRIMITIVES),
])
