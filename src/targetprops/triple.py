"""
Structured target triples

A Triple arrives already parsed: these types only carry the pieces.
Architectures are a tagged variant (family + microarchitecture level) so
that rules can select a whole family, e.g. every 32-bit x86 level.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from .common.enum import NamedEnum


class ArchFamily(NamedEnum):
    """Families of related architecture levels"""
    X86_16 = "x86_16"
    X86_32 = "x86_32"
    X86_64 = "x86_64"
    CLEVER = "clever"
    HOLEYBYTES = "holeybytes"
    AARCH64 = "aarch64"
    AARCH64_BE = "aarch64_be"
    AARCH64_32 = "aarch64_32"
    ARM = "arm"
    ARM_BE = "armeb"
    M6502 = "m6502"
    M65C02 = "m65c02"
    W65C816 = "w65c816"


@dataclass(frozen=True)
class ArchId:
    """Architecture piece of a triple: a family plus a level within it"""
    family: ArchFamily
    level: int = 0
    name: str = field(default="", compare=False)

    def __str__(self):
        return self.name or f"{self.family.value}.{self.level}"


class OsId(NamedEnum):
    """Operating system piece of a triple"""
    NONE = "none"
    NULL = "null"
    LINUX = "linux"
    WIN32 = "win32"
    LILIUM = "lilium"
    CLEVEROS = "cleveros"
    FREEBSD = "freebsd"
    NETBSD = "netbsd"
    OPENBSD = "openbsd"
    MACOSX = "macosx"
    FUCHSIA = "fuchsia"
    SNES = "snes"
    NES = "nes"


class EnvId(NamedEnum):
    """Environment piece of a triple"""
    GNU = "gnu"
    GNUX32 = "gnux32"
    GNUEABI = "gnueabi"
    GNUEABIHF = "gnueabihf"
    EABI = "eabi"
    EABIHF = "eabihf"
    MUSL = "musl"
    MSVC = "msvc"
    KERNEL = "kernel"


class ObjectFormat(NamedEnum):
    """Object format piece of a triple"""
    ELF = "elf"
    COFF = "coff"
    MACHO = "macho"
    WASM = "wasm"
    XO65 = "xo65"


def _arch(family: ArchFamily, level: int, name: str) -> ArchId:
    return ArchId(family, level, name)


I86 = _arch(ArchFamily.X86_16, 0, "i86")
I8086 = _arch(ArchFamily.X86_16, 0, "i8086")
I086 = _arch(ArchFamily.X86_16, 0, "i086")
I186 = _arch(ArchFamily.X86_16, 1, "i186")
I286 = _arch(ArchFamily.X86_16, 2, "i286")
I386 = _arch(ArchFamily.X86_32, 3, "i386")
I486 = _arch(ArchFamily.X86_32, 4, "i486")
I586 = _arch(ArchFamily.X86_32, 5, "i586")
I686 = _arch(ArchFamily.X86_32, 6, "i686")
I786 = _arch(ArchFamily.X86_32, 7, "i786")
X86_64 = _arch(ArchFamily.X86_64, 1, "x86_64")
X86_64V2 = _arch(ArchFamily.X86_64, 2, "x86_64v2")
X86_64V3 = _arch(ArchFamily.X86_64, 3, "x86_64v3")
X86_64V4 = _arch(ArchFamily.X86_64, 4, "x86_64v4")
CLEVER = _arch(ArchFamily.CLEVER, 0, "clever")
HOLEYBYTES = _arch(ArchFamily.HOLEYBYTES, 0, "holeybytes")
AARCH64 = _arch(ArchFamily.AARCH64, 0, "aarch64")
AARCH64_BE = _arch(ArchFamily.AARCH64_BE, 0, "aarch64_be")
AARCH64_32 = _arch(ArchFamily.AARCH64_32, 0, "aarch64_32")
ARM = _arch(ArchFamily.ARM, 0, "arm")
ARM_BE = _arch(ArchFamily.ARM_BE, 0, "armeb")
M6502 = _arch(ArchFamily.M6502, 0, "m6502")
M65C02 = _arch(ArchFamily.M65C02, 0, "m65c02")
W65C816 = _arch(ArchFamily.W65C816, 0, "wc65c816")
W65816 = _arch(ArchFamily.W65C816, 0, "w65c816")

ARCH_IDS: Dict[str, ArchId] = {
    a.name: a for a in (
        I86, I8086, I086, I186, I286, I386, I486, I586, I686, I786,
        X86_64, X86_64V2, X86_64V3, X86_64V4,
        CLEVER, HOLEYBYTES, AARCH64, AARCH64_BE, AARCH64_32, ARM, ARM_BE,
        M6502, M65C02, W65C816, W65816,
    )
}


@dataclass(frozen=True)
class Triple:
    """A parsed compilation target"""
    arch: ArchId
    os: OsId = OsId.NONE
    env: Optional[EnvId] = None
    objfmt: Optional[ObjectFormat] = None

    def __str__(self):
        parts = [str(self.arch), self.os.value]
        if self.env is not None:
            parts.append(self.env.value)
        if self.objfmt is not None:
            parts.append(self.objfmt.value)
        return "-".join(parts)
