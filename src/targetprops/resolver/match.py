'''Ordered rule tables

Each lookup a triple has to satisfy is an ordered list of rules. A rule is a
pattern over (architecture, OS, environment, object format) plus the value
it selects. The first matching rule wins, so specificity is expressed by
order: specific (arch, OS, env) rules first, generic OS rules next, catch-all
object-format rules last.
'''

import logging
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar, Union, FrozenSet

from ..triple import ArchFamily, ArchId, EnvId, ObjectFormat, OsId, Triple

logger = logging.getLogger(__name__)

T = TypeVar('T')
ArchSelector = Union[ArchFamily, ArchId]


def _selectors(value) -> Optional[FrozenSet]:
    '''None stays a wildcard; a single value or an iterable becomes a frozenset'''
    if value is None:
        return None
    if isinstance(value, (ArchFamily, ArchId, OsId, EnvId, ObjectFormat)):
        return frozenset((value,))
    return frozenset(value)


def _family(selector: ArchSelector) -> ArchFamily:
    return selector if isinstance(selector, ArchFamily) else selector.family


def _arch_overlap(first, second) -> bool:
    if first is None or second is None:
        return True

    for a in first:
        for b in second:
            if isinstance(a, ArchId) and isinstance(b, ArchId):
                if a == b:
                    return True
            elif _family(a) is _family(b):
                return True

    return False


@dataclass(frozen=True)
class Pattern:
    '''Pattern over the triple pieces; a None field matches anything'''
    arch: Optional[FrozenSet[ArchSelector]] = None
    os: Optional[FrozenSet[OsId]] = None
    env: Optional[FrozenSet[EnvId]] = None
    objfmt: Optional[FrozenSet[ObjectFormat]] = None

    def matches(self, triple: Triple) -> bool:
        if self.arch is not None:
            if triple.arch not in self.arch and triple.arch.family not in self.arch:
                return False

        if self.os is not None and triple.os not in self.os:
            return False

        if self.env is not None and triple.env not in self.env:
            return False

        if self.objfmt is not None and triple.objfmt not in self.objfmt:
            return False

        return True

    def overlaps(self, other: 'Pattern') -> bool:
        '''True if some triple could match both patterns'''
        if not _arch_overlap(self.arch, other.arch):
            return False

        for name in ('os', 'env', 'objfmt'):
            mine, theirs = getattr(self, name), getattr(other, name)
            if mine is not None and theirs is not None and not mine & theirs:
                return False

        return True

    def __str__(self):
        parts = []
        for name in ('arch', 'os', 'env', 'objfmt'):
            sel = getattr(self, name)
            if sel is not None:
                parts.append(f"{name}={'|'.join(sorted(str(s) for s in sel))}")
        return ', '.join(parts) or '*'


def when(arch = None, os = None, env = None, objfmt = None) -> Pattern:
    '''Build a Pattern from single values or iterables of values'''
    return Pattern(
        arch = _selectors(arch),
        os = _selectors(os),
        env = _selectors(env),
        objfmt = _selectors(objfmt),
    )


ANY = Pattern()


@dataclass(frozen=True)
class Rule(Generic[T]):
    pattern: Pattern
    value: T


class RuleTable(Generic[T]):
    '''An ordered, immutable list of rules evaluated first-match-wins'''

    def __init__(self, name: str, rules: Iterable[Union[Rule, tuple]] = ()):
        self.name = name
        self._rules = tuple(
            r if isinstance(r, Rule) else Rule(r[0], r[1])
            for r in rules
        )

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self):
        return f'RuleTable({self.name!r}, {len(self._rules)} rules)'

    def match(self, triple: Triple) -> Optional[Rule]:
        '''Return the first rule matching the triple'''
        for index, rule in enumerate(self._rules):
            if rule.pattern.matches(triple):
                logger.debug('%s: %s matched rule %d (%s)', self.name, triple, index, rule.pattern)
                return rule

        logger.debug('%s: no rule for %s', self.name, triple)
        return None

    def lookup(self, triple: Triple) -> Optional[T]:
        '''Return the value of the first matching rule, or None'''
        rule = self.match(triple)
        return None if rule is None else rule.value

    def values(self) -> List[Any]:
        '''Distinct rule values, in rule order'''
        seen = []
        for rule in self._rules:
            if not any(v is rule.value for v in seen):
                seen.append(rule.value)
        return seen
