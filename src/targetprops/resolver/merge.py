'''Extended Property Merger

Layers the extended property maps of a target, later tiers overwriting
earlier ones:

    architecture < default machine < OS < target < explicit machine

The default machine tier only applies when no machine was named, and the
explicit machine tier only when one was. OS entries keyed `arch.*` or
`<arch name>*` never overwrite a key that is already present.
'''

import logging
from typing import Dict, Iterable, Optional, Tuple

from ..properties import PropertyValue

logger = logging.getLogger(__name__)

ARCH_PREFIX = 'arch.'

Pairs = Iterable[Tuple[str, PropertyValue]]


def _is_arch_scoped(key: str, arch_name: str) -> bool:
    return key.startswith(ARCH_PREFIX) or key.startswith(arch_name)


def merge_properties(
    arch_name: str,
    arch_props: Pairs,
    default_machine_props: Pairs,
    os_props: Pairs,
    target_props: Pairs,
    machine_props: Optional[Pairs] = None,
) -> Dict[str, PropertyValue]:
    '''Flatten the property tiers into one map

    machine_props is None when no explicit machine was named.
    '''
    working: Dict[str, PropertyValue] = {}

    working.update(arch_props)

    if machine_props is None:
        working.update(default_machine_props)

    for key, value in os_props:
        if _is_arch_scoped(key, arch_name) and key in working:
            logger.debug('Keeping %s over OS value %r', key, value)
            continue
        working[key] = value

    working.update(target_props)

    if machine_props is not None:
        working.update(machine_props)

    return working
