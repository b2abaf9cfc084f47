"""
Compilation target properties: triple matching, feature resolution and
extended property merging
"""

__version__ = "0.1.0"

from .exceptions import (
    DatabaseError,
    TargetPropsError,
    UnknownFeatureReference,
    UnknownMachine,
    UnsupportedTarget,
)
from .properties.target import Target
from .resolver.assemble import TargetDatabase, TargetOverride, resolve
from .triple import ArchFamily, ArchId, EnvId, ObjectFormat, OsId, Triple

__all__ = [
    "ArchFamily", "ArchId", "EnvId", "ObjectFormat", "OsId", "Triple",
    "Target", "TargetDatabase", "TargetOverride", "resolve",
    "TargetPropsError", "UnsupportedTarget", "UnknownFeatureReference",
    "UnknownMachine", "DatabaseError",
]
