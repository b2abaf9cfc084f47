"""Lilium OS and Lilium-like systems"""

from ...properties.link import DefaultLinking, FILENAMES_ELF, LinkProfile, SEARCH_UNIX_DEFAULT
from .clever import ELF_CLEVER, ELF_CLEVER_FREESTANDING
from .x86 import ELF_X86_32, ELF_X86_32_FREESTANDING, ELF_X86_64, ELF_X86_64_FREESTANDING

LILIUM_LIBRARIES = DefaultLinking(
    start_files=("liblilium-init.o",),
    libraries=("c", "usi", "usi-support"),
)


def _userspace(formats, dynlinker):
    return LinkProfile(
        formats=formats,
        search=SEARCH_UNIX_DEFAULT,
        output_filename=FILENAMES_ELF,
        dynlinker_name=dynlinker,
        default_libraries=LILIUM_LIBRARIES,
    )


def _kernel(formats):
    # kernel images link statically, without the userspace runtime
    return LinkProfile(
        formats=formats,
        search=SEARCH_UNIX_DEFAULT,
        output_filename=FILENAMES_ELF,
    )


X86_64_LILIUM_LINK = _userspace(ELF_X86_64, "/lib/ld-lilium-x86_64.so.0")
X86_32_LILIUM_LINK = _userspace(ELF_X86_32, "/lib/ld-lilium-i686.so.0")
CLEVER_LILIUM_LINK = _userspace(ELF_CLEVER, "/lib/ld-lilium-clever.so.0")

X86_64_LILIUM_KERNEL_LINK = _kernel(ELF_X86_64_FREESTANDING)
X86_32_LILIUM_KERNEL_LINK = _kernel(ELF_X86_32_FREESTANDING)
CLEVER_LILIUM_KERNEL_LINK = _kernel(ELF_CLEVER_FREESTANDING)
