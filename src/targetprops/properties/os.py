"""Operating system properties"""

from dataclasses import dataclass
from typing import Tuple

from . import PropertyPairs, property_pairs


@dataclass(frozen=True)
class OperatingSystem:
    """Properties about the OS"""
    name: str
    family_names: Tuple[str, ...] = ()
    is_unix_like: bool = False
    is_windows_like: bool = False
    properties: PropertyPairs = ()

    def __post_init__(self):
        object.__setattr__(self, "family_names", tuple(self.family_names))
        object.__setattr__(self, "properties", property_pairs(self.properties))

    @property
    def is_freestanding(self) -> bool:
        return not self.family_names
