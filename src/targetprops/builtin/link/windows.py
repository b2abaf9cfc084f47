"""Windows (MSVC environment)"""

from ...properties.link import (
    ALL_ARTIFACTS,
    ArchiveFormat,
    DefaultLinking,
    FILENAMES_PE,
    LinkerFlavour,
    LinkFormat,
    LinkProfile,
    SEARCH_WINDOWS_DEFAULT,
    StaticLibraryFormat,
    SupportedArtifacts,
)

# PE has no static PIE
_PE_ARTIFACTS = ALL_ARTIFACTS & ~SupportedArtifacts.STATIC_PIE

PE_X86_64 = LinkFormat(
    object_binfmt="pe-x86-64",
    exec_binfmt="pei-x86-64",
    staticlib_format=StaticLibraryFormat(ArchiveFormat.SYSV_WIN),
    supported_artifacts=_PE_ARTIFACTS,
    default_linker_format=LinkerFlavour.LINK,
)

PE_X86_32 = LinkFormat(
    object_binfmt="pe-i386",
    exec_binfmt="pei-i386",
    staticlib_format=StaticLibraryFormat(ArchiveFormat.SYSV_WIN),
    supported_artifacts=_PE_ARTIFACTS,
    default_linker_format=LinkerFlavour.LINK,
)

MSVC_LIBRARIES = DefaultLinking(libraries=("msvcrt", "kernel32"))

X86_64_WINDOWS_MSVC_LINK = LinkProfile(
    formats=PE_X86_64,
    search=SEARCH_WINDOWS_DEFAULT,
    output_filename=FILENAMES_PE,
    default_libraries=MSVC_LIBRARIES,
)

X86_32_WINDOWS_MSVC_LINK = LinkProfile(
    formats=PE_X86_32,
    search=SEARCH_WINDOWS_DEFAULT,
    output_filename=FILENAMES_PE,
    default_libraries=MSVC_LIBRARIES,
)
