"""Linux"""

from ...properties.link import DefaultLinking, FILENAMES_ELF, LinkProfile, NxStackMode
from .x86 import (
    ELF_X86_32,
    ELF_X86_32_MULTILIB,
    ELF_X86_64,
    ELF_X86_64_MULTILIB,
    ELF_X86_64_MULTILIBX32,
    ELF_X86_64_X32,
)

LINUX_LIBRARIES = DefaultLinking(
    start_files=("crt1.o", "crti.o"),
    end_files=("crtn.o",),
    libraries=("c",),
)

X86_64_LINUX_GNU_LINK = LinkProfile(
    formats=ELF_X86_64,
    search=ELF_X86_64_MULTILIB,
    output_filename=FILENAMES_ELF,
    nx_stack=NxStackMode.GNU_STACK,
    dynlinker_name="/lib64/ld-linux-x86-64.so.2",
    default_libraries=LINUX_LIBRARIES,
)

X86_64_LINUX_GNUX32_LINK = LinkProfile(
    formats=ELF_X86_64_X32,
    search=ELF_X86_64_MULTILIBX32,
    output_filename=FILENAMES_ELF,
    nx_stack=NxStackMode.GNU_STACK,
    dynlinker_name="/libx32/ld-linux-x32.so.2",
    default_libraries=LINUX_LIBRARIES,
)

X86_32_LINUX_GNU_LINK = LinkProfile(
    formats=ELF_X86_32,
    search=ELF_X86_32_MULTILIB,
    output_filename=FILENAMES_ELF,
    nx_stack=NxStackMode.GNU_STACK,
    dynlinker_name="/lib/ld-linux.so.2",
    default_libraries=LINUX_LIBRARIES,
)
