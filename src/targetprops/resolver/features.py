'''Feature Graph Resolver

Computes the enabled feature set of a target from a machine's base features
and the target's enable/disable overrides.

Enabling a feature pulls in everything it implies (forward closure);
disabling a feature also disables everything that implies it (reverse
closure over the dependents graph). The two closures are computed
independently and combined only at the end, so the order of the overrides
does not matter and a disable always beats an enable of the same feature.
'''

import logging
from typing import AbstractSet, FrozenSet, Iterable, Optional, Set, Tuple

from ..common.config import unknown_feature_policy
from ..exceptions import UnknownFeatureReference
from ..properties.arch import FeatureVocabulary

logger = logging.getLogger(__name__)


def forward_closure(vocabulary: FeatureVocabulary, seed: Iterable[str]) -> Set[str]:
    '''Grow `seed` with every feature transitively implied by a member'''
    working = set(seed)
    changed = True

    while changed:
        changed = False
        for name in list(working):
            missing = vocabulary.implies(name) - working
            if missing:
                working |= missing
                changed = True

    return working


def reverse_closure(vocabulary: FeatureVocabulary, seed: Iterable[str]) -> Set[str]:
    '''Grow `seed` with every feature that transitively depends on a member'''
    working = set(seed)
    changed = True

    while changed:
        changed = False
        for name in list(working):
            missing = vocabulary.dependents(name) - working
            if missing:
                working |= missing
                changed = True

    return working


def _check_known(
    arch_name: str,
    vocabulary: FeatureVocabulary,
    names: AbstractSet[str],
    policy: str,
) -> Set[str]:
    '''Apply the unknown-feature policy, returning the names to keep'''
    unknown = set(names) - vocabulary.keys()
    if not unknown:
        return set(names)

    if policy == 'error':
        raise UnknownFeatureReference(arch_name, unknown)

    logger.warning('Ignoring unknown feature(s) for %s: %s', arch_name, ', '.join(sorted(unknown)))
    return set(names) - unknown


def compute_enabled_features(
    vocabulary: FeatureVocabulary,
    base: Iterable[str],
    overrides: Iterable[Tuple[str, bool]] = (),
    arch_name: str = '<arch>',
    policy: Optional[str] = None,
) -> FrozenSet[str]:
    '''Resolve the final enabled feature set

    base:      features enabled by the selected machine
    overrides: (feature, enable) pairs
    policy:    'error' or 'ignore' for names missing from the vocabulary;
               defaults to the configured policy
    '''
    if policy is None:
        policy = unknown_feature_policy()

    overrides = list(overrides)
    enabled = set(base) | {name for name, enable in overrides if enable}
    disabled = {name for name, enable in overrides if not enable}

    enabled = _check_known(arch_name, vocabulary, enabled, policy)
    disabled = _check_known(arch_name, vocabulary, disabled, policy)

    enabled = forward_closure(vocabulary, enabled)
    disabled = reverse_closure(vocabulary, disabled)

    result = frozenset(enabled - disabled)
    logger.debug(
        '%s: %d enabled, %d disabled after closure, %d final',
        arch_name, len(enabled), len(disabled), len(result),
    )
    return result
