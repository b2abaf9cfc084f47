"""Builtin operating systems"""

from ..properties.os import OperatingSystem
from ..resolver.match import RuleTable, when
from ..triple import OsId

# Freestanding target with no OS
OS_STANDALONE = OperatingSystem(name="none")

LINUX = OperatingSystem(
    name="linux",
    family_names=("linux",),
    is_unix_like=True,
)

WINDOWS = OperatingSystem(
    name="windows",
    family_names=("windows",),
    is_windows_like=True,
)

# https://github.com/LiliumOS
LILIUM = OperatingSystem(
    name="lilium",
    family_names=("lilium",),
)

# Clever-ISA 1.0 test OS, Lilium-like
CLEVEROS = OperatingSystem(
    name="cleveros",
    family_names=("lilium",),
)

OS_RULES = RuleTable("operating system", [
    (when(os=OsId.LINUX), LINUX),
    (when(os=OsId.WIN32), WINDOWS),
    (when(os=OsId.CLEVEROS), CLEVEROS),
    (when(os=OsId.LILIUM), LILIUM),
    (when(os=(OsId.SNES, OsId.NES, OsId.NONE, OsId.NULL)), OS_STANDALONE),
])
