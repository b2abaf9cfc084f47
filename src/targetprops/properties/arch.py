"""
Architecture properties

Describes what CPU features an architecture has (and which features imply
which), the machines it knows about, its call tags, and the extended
properties implied by using it.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple, Union

from ..exceptions import DatabaseError, UnknownMachine
from . import PropertyPairs, property_pairs

FeatureSpec = Union[str, Tuple[str, Iterable[str]]]


class FeatureVocabulary(Mapping):
    """Feature name -> frozenset of implied feature names

    Entries are either a bare name or a (name, implied-names) pair. A name
    listed twice has its implications merged. The graph may contain cycles.
    """

    def __init__(self, entries: Iterable[FeatureSpec] = ()):
        implies: Dict[str, Set[str]] = {}
        for entry in entries:
            if isinstance(entry, str):
                name, implied = entry, ()
            else:
                name, implied = entry
            implies.setdefault(name, set()).update(implied)

        self._implies = MappingProxyType({k: frozenset(v) for k, v in implies.items()})

        dependents: Dict[str, Set[str]] = {}
        for name, implied in self._implies.items():
            for target in implied:
                dependents.setdefault(target, set()).add(name)
        self._dependents = MappingProxyType({k: frozenset(v) for k, v in dependents.items()})

    def __getitem__(self, name: str) -> FrozenSet[str]:
        return self._implies[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._implies)

    def __len__(self) -> int:
        return len(self._implies)

    def __hash__(self):
        return hash(frozenset(self._implies.items()))

    def __repr__(self):
        return f"FeatureVocabulary({len(self)} features)"

    def implies(self, name: str) -> FrozenSet[str]:
        """Features directly implied by `name` (empty for unknown names)"""
        return self._implies.get(name, frozenset())

    def dependents(self, name: str) -> FrozenSet[str]:
        """Features that directly imply `name`"""
        return self._dependents.get(name, frozenset())

    def undefined_references(self) -> Dict[str, FrozenSet[str]]:
        """Implication edges whose target is not itself a defined feature"""
        dangling = {}
        for name, implied in self._implies.items():
            missing = implied - self._implies.keys()
            if missing:
                dangling[name] = frozenset(missing)
        return dangling


@dataclass(frozen=True)
class Machine:
    """A named CPU within an architecture (the `-march` value)"""
    name: str
    features: FrozenSet[str] = frozenset()
    properties: PropertyPairs = ()

    def __post_init__(self):
        object.__setattr__(self, "features", frozenset(self.features))
        object.__setattr__(self, "properties", property_pairs(self.properties))


@dataclass(frozen=True)
class AsmSpec:
    """Inline assembly description (no properties yet)"""
    dialect: str = ""


@dataclass(frozen=True)
class Architecture:
    """ISA-level description"""
    name: str
    machines: Tuple[Machine, ...]
    default_machine: Machine
    raw_width: int
    features: FeatureVocabulary = field(default_factory=FeatureVocabulary)
    aliases: Tuple[str, ...] = ()
    call_tags: Tuple[str, ...] = ()
    properties: PropertyPairs = ()
    asm: Optional[AsmSpec] = None

    def __post_init__(self):
        object.__setattr__(self, "machines", tuple(self.machines))
        object.__setattr__(self, "aliases", tuple(self.aliases))
        object.__setattr__(self, "call_tags", tuple(self.call_tags))
        object.__setattr__(self, "properties", property_pairs(self.properties))

    def machine(self, name: str) -> Machine:
        """Look up a machine by name"""
        for mach in self.machines:
            if mach.name == name:
                return mach
        raise UnknownMachine(self.name, name)

    def machine_names(self) -> List[str]:
        return [mach.name for mach in self.machines]

    def validate(self):
        """Check the database invariants for this architecture

        Raises DatabaseError on the first kind of defect found.
        """
        dangling = self.features.undefined_references()
        if dangling:
            edges = ", ".join(f"{k} -> {sorted(v)}" for k, v in sorted(dangling.items()))
            raise DatabaseError(f"{self.name}: implied features are not defined: {edges}")

        for mach in self.machines:
            unknown = mach.features - self.features.keys()
            if unknown:
                raise DatabaseError(
                    f"{self.name}: machine {mach.name} uses unknown features {sorted(unknown)}"
                )

        if self.default_machine not in self.machines:
            raise DatabaseError(
                f"{self.name}: default machine {self.default_machine.name} is not in the machine list"
            )
