"""
Property Introspector

Reads the first-level properties of any object without modifying it.
None of the public functions raise: a type that cannot be analyzed gives
an empty result, an unreadable property is skipped.
"""
from typing import Any, Dict, List

from loguru import logger

from .describable import IntrospectionError, describe_type
from .schemas import NULL_SENTINEL, Property, PropertySet, type_identifier


def build_property_set(obj: Any, read_values: bool = True) -> PropertySet:
    """
    Introspects an object into a fresh PropertySet

    Args:
        obj: Any object
        read_values: If False, accessors are never invoked

    Returns:
        PropertySet in discovery order (empty if the type cannot be analyzed)
    """
    cls = type(obj)
    property_set = PropertySet(type_name=type_identifier(cls))

    try:
        descriptors = describe_type(cls)
    except IntrospectionError as e:
        logger.debug(f"Introspection Exception: {e}")
        return property_set

    for descriptor in descriptors:
        prop = Property(
            name=descriptor.name,
            declared_type=type_identifier(descriptor.declared_type)
        )

        if read_values and not descriptor.readable:
            logger.debug(f"No getter for {property_set.type_name}.{descriptor.name}")
        elif read_values:
            try:
                value = descriptor.read(obj)
            except Exception as e:
                logger.debug(f"Cannot read {property_set.type_name}.{descriptor.name}: {e!r}")
            else:
                prop.value = value
                prop.runtime_value_type = NULL_SENTINEL if value is None else type_identifier(type(value))

        property_set.properties.append(prop)

    return property_set


def list_property_names(obj: Any) -> List[str]:
    """Names of every discoverable property"""
    return build_property_set(obj, read_values=False).names()


def map_property_declared_types(obj: Any) -> Dict[str, str]:
    """
    Declared type per property, sorted by name

    Unresolvable declared types map to "null".
    """
    return build_property_set(obj, read_values=False).declared_types()


def map_property_value_types(obj: Any) -> Dict[str, str]:
    """
    Runtime type of the current value per property, sorted by name

    None and unset values map to "null"; properties whose accessor fails
    (or that have no getter) are left out.
    """
    return build_property_set(obj).value_types()


def map_non_null_properties(obj: Any) -> Dict[str, Any]:
    """Current values of the properties that are set, sorted by name"""
    return build_property_set(obj).non_null_values()
