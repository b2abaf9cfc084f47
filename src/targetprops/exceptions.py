"""Exception hierarchy for target resolution."""

from __future__ import annotations


class TargetPropsError(Exception):
    """Base exception for targetprops."""


class UnsupportedTarget(TargetPropsError):
    """A required lookup found no rule for the triple."""

    def __init__(self, triple, lookup: str) -> None:
        self.triple = triple
        self.lookup = lookup
        super().__init__(f"unsupported target {triple}: no {lookup} matches")


class UnknownFeatureReference(TargetPropsError):
    """An override or machine names a feature missing from the vocabulary."""

    def __init__(self, arch: str, features) -> None:
        self.arch = arch
        self.features = tuple(sorted(features))
        names = ", ".join(self.features)
        super().__init__(f"unknown feature(s) for {arch}: {names}")


class UnknownMachine(TargetPropsError):
    """An explicit machine name is not known to the architecture."""

    def __init__(self, arch: str, machine: str) -> None:
        self.arch = arch
        self.machine = machine
        super().__init__(f"unknown machine {machine!r} for architecture {arch}")


class DatabaseError(TargetPropsError):
    """The target database violates one of its invariants."""
