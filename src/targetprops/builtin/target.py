"""Builtin call tags and per-target overrides"""

from ..resolver.assemble import TargetOverride
from ..resolver.match import RuleTable, when
from ..triple import ArchFamily, EnvId, ObjectFormat, OsId

_UNIX_OSES = (OsId.LINUX, OsId.LILIUM, OsId.FREEBSD, OsId.NETBSD, OsId.OPENBSD, OsId.MACOSX)
_X86_16_32 = (ArchFamily.X86_16, ArchFamily.X86_32)
_M65 = (ArchFamily.M6502, ArchFamily.M65C02, ArchFamily.W65C816)
_NO_OS = (OsId.NONE, OsId.NULL)

DEFAULT_TAG_RULES = RuleTable("default call tag", [
    (when(arch=ArchFamily.X86_64, os=_UNIX_OSES), "sysv64"),
    (when(arch=ArchFamily.X86_64, objfmt=ObjectFormat.ELF), "sysv64"),
    (when(arch=ArchFamily.X86_64, os=OsId.WIN32), "win64"),
    (when(arch=ArchFamily.X86_32, os=_UNIX_OSES), "cdecl-unix"),
    (when(arch=ArchFamily.X86_32, objfmt=ObjectFormat.ELF), "cdecl-unix"),
    (when(arch=ArchFamily.X86_32, os=OsId.WIN32), "cdecl-ms"),
    (when(arch=ArchFamily.CLEVER), "C"),
    (when(arch=ArchFamily.X86_16), "cdecl"),
    (when(arch=_M65), "C"),
])

# Only where the system convention differs from the default one
SYSTEM_TAG_RULES = RuleTable("system call tag", [
    (when(arch=ArchFamily.X86_32, os=OsId.LILIUM), "fastcall-unix"),
    (when(arch=ArchFamily.X86_32, os=OsId.WIN32), "stdcall-ms"),
])

NO_FP_STATE = TargetOverride(features=(("x87", False), ("fxsr", False), ("xsave", False)))

RUSTCALL_FASTCALL = ("rust.abi.rustcall-tag", "fastcall-unix")

OVERRIDE_RULES = RuleTable("target override", [
    (when(arch=_X86_16_32, os=_NO_OS), NO_FP_STATE),
    (when(arch=ArchFamily.X86_64, os=_NO_OS), NO_FP_STATE),
    (when(arch=_X86_16_32, os=OsId.LILIUM, env=EnvId.KERNEL),
        TargetOverride(features=(("xsave", False),), properties=(RUSTCALL_FASTCALL,))),
    (when(arch=_X86_16_32, os=(OsId.LILIUM, OsId.WIN32)),
        TargetOverride(properties=(RUSTCALL_FASTCALL,))),
    (when(arch=ArchFamily.X86_64, os=OsId.LILIUM, env=EnvId.KERNEL),
        TargetOverride(features=(("xsave", False),))),
])
