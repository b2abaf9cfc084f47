"""
Builtin target database

The rule tables are plain module-level literals. `get_database()` bundles
them into a TargetDatabase the first time it is called and validates it, so
a malformed table fails at build time and never during resolution.
"""

import logging
import threading
from typing import List, Optional

from ..properties.arch import Architecture
from ..properties.os import OperatingSystem
from ..resolver.assemble import TargetDatabase as Database
from .abi import ABI_RULES, LAYOUT_RULES
from .archs import ARCH_RULES
from .link import LINK_RULES
from .os import OS_RULES
from .target import DEFAULT_TAG_RULES, OVERRIDE_RULES, SYSTEM_TAG_RULES

logger = logging.getLogger(__name__)

_database: Optional[Database] = None
_lock = threading.Lock()


def build_database() -> Database:
    '''Bundle and validate the builtin tables'''
    database = Database(
        archs = ARCH_RULES,
        oses = OS_RULES,
        abis = ABI_RULES,
        layouts = LAYOUT_RULES,
        links = LINK_RULES,
        default_tags = DEFAULT_TAG_RULES,
        system_tags = SYSTEM_TAG_RULES,
        overrides = OVERRIDE_RULES,
    )
    database.validate()
    logger.debug('Built target database: %d architectures, %d operating systems',
                 len(database.archs.values()), len(database.oses.values()))
    return database


def get_database() -> Database:
    '''Get the builtin database, building it on first use'''
    global _database

    with _lock:
        if _database is None:
            _database = build_database()

    return _database


def architectures() -> List[Architecture]:
    return get_database().archs.values()


def operating_systems() -> List[OperatingSystem]:
    return get_database().oses.values()
