"""
Link properties

How to produce object files and artifacts, how to find libraries, and how
to name output files.
"""

from dataclasses import dataclass, replace
from pathlib import PurePosixPath
from typing import List, Optional, Tuple

from ..common.enum import NamedEnum, NamedFlag


class SupportedArtifacts(NamedFlag):
    """Artifact kinds a target can produce"""
    EXE = 0x01
    DYLIB = 0x02
    PIC = 0x04
    PIE = 0x08
    DEFAULT_PIE = 0x10
    STATIC_PIE = 0x20


ALL_ARTIFACTS = (
    SupportedArtifacts.EXE
    | SupportedArtifacts.DYLIB
    | SupportedArtifacts.PIC
    | SupportedArtifacts.PIE
    | SupportedArtifacts.DEFAULT_PIE
    | SupportedArtifacts.STATIC_PIE
)
NO_DEFAULT_PIE = ALL_ARTIFACTS & ~SupportedArtifacts.DEFAULT_PIE
NO_DYNLINKER = SupportedArtifacts.EXE | SupportedArtifacts.STATIC_PIE


class ArchiveFormat(NamedEnum):
    SYSV = "sysv"
    SYSV_WIN = "sysv-win"
    BSD = "bsd"


@dataclass(frozen=True)
class StaticLibraryFormat:
    """An ar archive of the given flavour, or (archive=None) a plain object"""
    archive: Optional[ArchiveFormat] = ArchiveFormat.SYSV

    @property
    def is_object(self) -> bool:
        return self.archive is None

    def __str__(self):
        return "object" if self.archive is None else f"archive-{self.archive.value}"


class LinkerFlavour(NamedEnum):
    LD = "ld"
    MACH_LD = "mach-ld"
    LINK = "link"
    WASM_LD = "wasm-ld"


class NxStackMode(NamedEnum):
    """What it takes to get a non-executable stack"""
    DEFAULT = "default"
    GNU_STACK = "gnu-stack"
    UNSUPPORTED = "unsupported"


class ArtifactKind(NamedEnum):
    OBJECT = "object"
    EXECUTABLE = "executable"
    DYLIB = "dylib"
    STATICLIB = "staticlib"


@dataclass(frozen=True)
class LinkFormat:
    object_binfmt: str
    exec_binfmt: str
    staticlib_format: StaticLibraryFormat = StaticLibraryFormat()
    supported_artifacts: SupportedArtifacts = ALL_ARTIFACTS
    default_linker_format: LinkerFlavour = LinkerFlavour.LD


@dataclass(frozen=True)
class LibrarySearch:
    """How `-l<name>` and the standard library are found

    base_dirs are absolute (relative to the sysroot), search_dirs are
    resolved relative to each base dir.
    """
    base_dirs: Tuple[str, ...]
    search_dirs: Tuple[str, ...]
    staticlib_prefixes: Tuple[str, ...]
    staticlib_suffixes: Tuple[str, ...]
    dylib_prefixes: Tuple[str, ...]
    dylib_suffixes: Tuple[str, ...]
    use_target_stem_dirs: bool = False

    def library_file_names(self, name: str, static: bool = False) -> List[str]:
        """Candidate file names for `-l<name>`, dynamic libraries first unless static"""
        combos = []
        if not static:
            combos += [(p, s) for p in self.dylib_prefixes for s in self.dylib_suffixes]
        combos += [(p, s) for p in self.staticlib_prefixes for s in self.staticlib_suffixes]

        names = []
        for prefix, suffix in combos:
            candidate = f"{prefix}{name}{suffix}"
            if candidate not in names:
                names.append(candidate)
        return names

    def search_directories(self, sysroot: str = "/", target_stem: Optional[str] = None) -> List[str]:
        """Library directories in search order"""
        root = PurePosixPath(sysroot)
        dirs = []
        for base in self.base_dirs:
            base_path = root / base.lstrip("/")
            roots = [base_path]
            if self.use_target_stem_dirs and target_stem:
                roots.insert(0, base_path / target_stem)

            for r in roots:
                for sub in self.search_dirs:
                    path = str(r / sub)
                    if path not in dirs:
                        dirs.append(path)
        return dirs


@dataclass(frozen=True)
class FileNames:
    """Prefixes and suffixes for output file names"""
    obj_prefix: str = ""
    obj_suffix: str = ".o"
    exe_prefix: str = ""
    exe_suffix: str = ""
    dylib_prefix: str = "lib"
    dylib_suffix: str = ".so"
    staticlib_prefix: str = "lib"
    staticlib_suffix: str = ".a"

    def output_name(self, kind: ArtifactKind, stem: str) -> str:
        prefix, suffix = {
            ArtifactKind.OBJECT: (self.obj_prefix, self.obj_suffix),
            ArtifactKind.EXECUTABLE: (self.exe_prefix, self.exe_suffix),
            ArtifactKind.DYLIB: (self.dylib_prefix, self.dylib_suffix),
            ArtifactKind.STATICLIB: (self.staticlib_prefix, self.staticlib_suffix),
        }[kind]
        return f"{prefix}{stem}{suffix}"


@dataclass(frozen=True)
class DefaultLinking:
    """Start files, end files and libraries added unless -nostartfiles/-nostdlib"""
    start_files: Tuple[str, ...] = ()
    end_files: Tuple[str, ...] = ()
    libraries: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LinkProfile:
    formats: LinkFormat
    search: LibrarySearch
    output_filename: FileNames
    nx_stack: NxStackMode = NxStackMode.DEFAULT
    dynlinker_name: Optional[str] = None
    default_libraries: Optional[DefaultLinking] = None

    def supports(self, artifacts: SupportedArtifacts) -> bool:
        return (self.formats.supported_artifacts & artifacts) == artifacts


SEARCH_UNIX_DEFAULT = LibrarySearch(
    base_dirs=("/", "/usr", "/usr/local"),
    search_dirs=("lib",),
    staticlib_prefixes=("lib",),
    staticlib_suffixes=(".a",),
    dylib_prefixes=("lib",),
    dylib_suffixes=(".so",),
    use_target_stem_dirs=True,
)

SEARCH_WINDOWS_DEFAULT = replace(
    SEARCH_UNIX_DEFAULT,
    base_dirs=("/",),
    staticlib_prefixes=("", "lib"),
    staticlib_suffixes=(".lib", ".a"),
    dylib_prefixes=("",),
    dylib_suffixes=(".lib",),
    use_target_stem_dirs=False,
)

FILENAMES_ELF = FileNames()

FILENAMES_PE = FileNames(
    obj_suffix=".obj",
    exe_suffix=".exe",
    dylib_prefix="",
    dylib_suffix=".dll",
    staticlib_prefix="lib",
    staticlib_suffix=".lib",
)
