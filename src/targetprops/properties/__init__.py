"""
Target properties

Every target has a collection of properties describing its behaviour:
primitive layout, ABI overrides, linking, CPU features, and extended
properties. Extended properties are dot-separated string keys with string,
boolean, or 64-bit integer values.
"""

from typing import Iterable, Tuple, Union

from ..exceptions import DatabaseError

PropertyValue = Union[str, bool, int]
PropertyPairs = Tuple[Tuple[str, PropertyValue], ...]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def check_property_value(key: str, value: PropertyValue) -> PropertyValue:
    """Validate one extended property value, returning it unchanged"""
    if not isinstance(key, str) or not key:
        raise DatabaseError(f"extended property key must be a non-empty string, got {key!r}")

    if isinstance(value, (str, bool)):
        return value

    if isinstance(value, int):
        if not INT64_MIN <= value <= INT64_MAX:
            raise DatabaseError(f"extended property {key} out of 64-bit range: {value}")
        return value

    raise DatabaseError(f"extended property {key} has unsupported type {type(value).__name__}")


def property_pairs(pairs: Iterable[Tuple[str, PropertyValue]]) -> PropertyPairs:
    """Freeze and validate a sequence of (key, value) pairs"""
    return tuple((key, check_property_value(key, value)) for key, value in pairs)
