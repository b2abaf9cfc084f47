"""Builtin link profiles"""

from ...resolver.match import RuleTable, when
from ...triple import ArchFamily, EnvId, ObjectFormat, OsId
from . import clever, lilium, linux, windows, x86

_LILIUM_LIKE = (OsId.LILIUM, OsId.CLEVEROS)

LINK_RULES = RuleTable("link profile", [
    (when(arch=ArchFamily.X86_64, os=OsId.LILIUM, env=EnvId.KERNEL), lilium.X86_64_LILIUM_KERNEL_LINK),
    (when(arch=ArchFamily.X86_64, os=OsId.LILIUM), lilium.X86_64_LILIUM_LINK),
    (when(arch=ArchFamily.X86_32, os=OsId.LILIUM, env=EnvId.KERNEL), lilium.X86_32_LILIUM_KERNEL_LINK),
    (when(arch=ArchFamily.X86_32, os=OsId.LILIUM), lilium.X86_32_LILIUM_LINK),
    (when(arch=ArchFamily.X86_64, os=OsId.LINUX, env=EnvId.GNU), linux.X86_64_LINUX_GNU_LINK),
    (when(arch=ArchFamily.X86_64, os=OsId.LINUX, env=EnvId.GNUX32), linux.X86_64_LINUX_GNUX32_LINK),
    (when(arch=ArchFamily.X86_64, os=OsId.WIN32, env=EnvId.MSVC), windows.X86_64_WINDOWS_MSVC_LINK),
    (when(arch=ArchFamily.X86_32, os=OsId.WIN32, env=EnvId.MSVC), windows.X86_32_WINDOWS_MSVC_LINK),
    (when(arch=ArchFamily.X86_64, objfmt=ObjectFormat.ELF), x86.ELF_X86_64_FREESTANDING_LINK),
    (when(arch=ArchFamily.X86_32, os=OsId.LINUX, env=EnvId.GNU), linux.X86_32_LINUX_GNU_LINK),
    (when(arch=ArchFamily.X86_32, objfmt=ObjectFormat.ELF), x86.ELF_X86_32_FREESTANDING_LINK),
    (when(arch=ArchFamily.CLEVER, os=_LILIUM_LIKE, env=EnvId.KERNEL), lilium.CLEVER_LILIUM_KERNEL_LINK),
    (when(arch=ArchFamily.CLEVER, os=_LILIUM_LIKE), lilium.CLEVER_LILIUM_LINK),
    (when(arch=ArchFamily.CLEVER, objfmt=ObjectFormat.ELF), clever.ELF_CLEVER_FREESTANDING_LINK),
])
