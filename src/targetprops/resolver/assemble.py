'''Target Assembler

Runs every lookup a triple must satisfy, builds the Target, then applies the
special-case override pass. Resolution is all-or-nothing: if any required
lookup has no matching rule, UnsupportedTarget is raised and no Target is
built.
'''

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from ..exceptions import DatabaseError, UnsupportedTarget
from ..properties import PropertyPairs, property_pairs
from ..properties.arch import Architecture
from ..properties.target import Target
from ..triple import Triple
from .match import Pattern, RuleTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TargetOverride:
    '''Entries appended to a Target by the override pass'''
    features: Tuple[Tuple[str, bool], ...] = ()
    properties: PropertyPairs = ()

    def __post_init__(self):
        object.__setattr__(self, 'features', tuple(self.features))
        object.__setattr__(self, 'properties', property_pairs(self.properties))


@dataclass(frozen=True)
class TargetDatabase:
    '''The lookup tables a triple is resolved against'''
    archs: RuleTable
    oses: RuleTable
    abis: RuleTable
    layouts: RuleTable
    links: RuleTable
    default_tags: RuleTable
    system_tags: RuleTable
    overrides: RuleTable

    def validate(self) -> 'TargetDatabase':
        '''Check database invariants, raising DatabaseError'''
        for arch in self.archs.values():
            arch.validate()

        for table in (self.default_tags, self.system_tags):
            for rule in table:
                for arch in self.reachable_archs(rule.pattern):
                    if rule.value not in arch.call_tags:
                        raise DatabaseError(
                            f'{table.name}: tag {rule.value!r} ({rule.pattern}) is not a call tag of {arch.name}'
                        )

        for rule in self.overrides:
            names = {name for name, _ in rule.value.features}
            for arch in self.reachable_archs(rule.pattern):
                unknown = names - arch.features.keys()
                if unknown:
                    raise DatabaseError(
                        f'{self.overrides.name}: override ({rule.pattern}) names features '
                        f'unknown to {arch.name}: {sorted(unknown)}'
                    )

        return self

    def reachable_archs(self, pattern: Pattern) -> List[Architecture]:
        '''Architectures whose arch rules can match a triple `pattern` also matches'''
        archs = []
        for rule in self.archs:
            if rule.pattern.overlaps(pattern) and not any(a is rule.value for a in archs):
                archs.append(rule.value)
        return archs


def _require(table: RuleTable, triple: Triple):
    value = table.lookup(triple)
    if value is None:
        raise UnsupportedTarget(triple, table.name)
    return value


def apply_override(target: Target, override: Optional[TargetOverride]) -> Target:
    '''Append override entries; profile references are left untouched'''
    if override is None:
        return target

    return replace(
        target,
        override_features = target.override_features + override.features,
        extended_properties = target.extended_properties + override.properties,
    )


def resolve(triple: Triple, database: Optional[TargetDatabase] = None) -> Target:
    '''Compute the Target for a triple

    Raises UnsupportedTarget when any required lookup fails.
    '''
    if database is None:
        from ..builtin import get_database
        database = get_database()

    arch = _require(database.archs, triple)
    os = _require(database.oses, triple)
    link = _require(database.links, triple)
    default_tag = _require(database.default_tags, triple)
    system_tag = database.system_tags.lookup(triple) or default_tag
    layout = _require(database.layouts, triple)
    abi = _require(database.abis, triple)

    target = Target(
        triple = triple,
        arch = arch,
        os = os,
        default_tag = default_tag,
        system_tag = system_tag,
        primitive_layout = layout,
        abi = abi,
        link = link,
    )

    target = apply_override(target, database.overrides.lookup(triple))
    logger.debug('Resolved %s: arch=%s os=%s tag=%s', triple, arch.name, os.name, default_tag)
    return target
