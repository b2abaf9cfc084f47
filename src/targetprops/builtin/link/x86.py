"""Linking properties common to x86 targets"""

from dataclasses import replace

from ...properties.link import (
    FILENAMES_ELF,
    LinkFormat,
    LinkProfile,
    NO_DEFAULT_PIE,
    NxStackMode,
    SEARCH_UNIX_DEFAULT,
)

ELF_X86_64 = LinkFormat(object_binfmt="elf64-x86_64", exec_binfmt="elf64-x86_64")
ELF_X86_64_X32 = LinkFormat(object_binfmt="elf32-x86_64", exec_binfmt="elf32-x86_64")
ELF_X86_32 = LinkFormat(object_binfmt="elf32-x86", exec_binfmt="elf32-x86")

ELF_X86_64_FREESTANDING = replace(ELF_X86_64, supported_artifacts=NO_DEFAULT_PIE)
ELF_X86_32_FREESTANDING = replace(ELF_X86_32, supported_artifacts=NO_DEFAULT_PIE)

# GNU multilib search layouts
ELF_X86_64_MULTILIB = replace(SEARCH_UNIX_DEFAULT, search_dirs=("lib", "lib64"))
ELF_X86_64_MULTILIBX32 = replace(SEARCH_UNIX_DEFAULT, search_dirs=("lib", "libx32"))
ELF_X86_32_MULTILIB = replace(SEARCH_UNIX_DEFAULT, search_dirs=("lib", "lib32"))

ELF_X86_64_FREESTANDING_LINK = LinkProfile(
    formats=ELF_X86_64_FREESTANDING,
    search=SEARCH_UNIX_DEFAULT,
    output_filename=FILENAMES_ELF,
    nx_stack=NxStackMode.UNSUPPORTED,
)

ELF_X86_32_FREESTANDING_LINK = LinkProfile(
    formats=ELF_X86_32_FREESTANDING,
    search=SEARCH_UNIX_DEFAULT,
    output_filename=FILENAMES_ELF,
    nx_stack=NxStackMode.UNSUPPORTED,
)
