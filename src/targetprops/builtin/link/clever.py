"""Linking properties for Clever-ISA"""

from dataclasses import replace

from ...properties.link import FILENAMES_ELF, LinkFormat, LinkProfile, NO_DEFAULT_PIE, SEARCH_UNIX_DEFAULT

ELF_CLEVER = LinkFormat(object_binfmt="elf64-clever", exec_binfmt="elf64-clever")

ELF_CLEVER_FREESTANDING = replace(ELF_CLEVER, supported_artifacts=NO_DEFAULT_PIE)

ELF_CLEVER_FREESTANDING_LINK = LinkProfile(
    formats=ELF_CLEVER_FREESTANDING,
    search=SEARCH_UNIX_DEFAULT,
    output_filename=FILENAMES_ELF,
)
