"""
Property Comparator

Counts the properties two objects have in common, under three rules:
- by name
- by name and declared type
- by name and runtime value type

Names and type identifiers are compared case-insensitively. Every property
of the first object is counted at most once, against the first match found
in the second object. Matches are not removed from the second object, so
'id' and 'ID' on the first object both count against one 'id' on the second.
"""
from typing import Any, Dict, Iterable

from .introspector import build_property_set, list_property_names, map_property_declared_types, map_property_value_types
from .schemas import ComparisonReport


def _same(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


def _count_common_names(names1: Iterable[str], names2: Iterable[str]) -> int:
    names2 = list(names2)
    count = 0
    for p1 in names1:
        for p2 in names2:
            if _same(p1, p2):
                count += 1
                break
    return count


def _count_common_typed(props1: Dict[str, str], props2: Dict[str, str]) -> int:
    count = 0
    for p1, type1 in props1.items():
        for p2, type2 in props2.items():
            if _same(p1, p2) and _same(type1, type2):
                count += 1
                break
    return count


def count_common_by_name(obj1: Any, obj2: Any) -> int:
    """
    Properties with alike names, regardless of type

    str "size" is equal to int "size".
    """
    return _count_common_names(list_property_names(obj1), list_property_names(obj2))


def count_common_by_name_and_declared_type(obj1: Any, obj2: Any) -> int:
    """
    Properties with alike names and declared types

    str "name" is not equal to int "name". Two properties whose declared
    type cannot be resolved are equal by the "null" marker.
    """
    return _count_common_typed(map_property_declared_types(obj1), map_property_declared_types(obj2))


def count_common_by_name_and_value_type(obj1: Any, obj2: Any) -> int:
    """
    Properties with alike names and current value types

    None values are never equal to set values: if "size" is 10 on one
    object and None on the other, it is not counted.
    """
    return _count_common_typed(map_property_value_types(obj1), map_property_value_types(obj2))


def compare_objects(obj1: Any, obj2: Any) -> ComparisonReport:
    """All three counts plus the property names of both objects"""
    left = build_property_set(obj1)
    right = build_property_set(obj2)

    return ComparisonReport(
        left_type=left.type_name,
        right_type=right.type_name,
        left_properties=left.names(),
        right_properties=right.names(),
        by_name=_count_common_names(left.names(), right.names()),
        by_name_and_declared_type=_count_common_typed(left.declared_types(), right.declared_types()),
        by_name_and_value_type=_count_common_typed(left.value_types(), right.value_types())
    )
