"""
Class Comparator Module
"""
from loguru import logger

from .schemas import (
    NULL_SENTINEL, PropertyDescriptor, Property, PropertySet, ComparisonReport, type_identifier
)
from .describable import Describable, IntrospectionError
from .introspector import (
    build_property_set,
    list_property_names,
    map_property_declared_types,
    map_property_value_types,
    map_non_null_properties
)
from .comparator import (
    count_common_by_name,
    count_common_by_name_and_declared_type,
    count_common_by_name_and_value_type,
    compare_objects
)
from .report import render_report

# Silent unless the application calls setup_logging()
logger.disable(__name__)

__all__ = [
    'NULL_SENTINEL',
    'PropertyDescriptor',
    'Property',
    'PropertySet',
    'ComparisonReport',
    'type_identifier',
    'Describable',
    'IntrospectionError',
    'build_property_set',
    'list_property_names',
    'map_property_declared_types',
    'map_property_value_types',
    'map_non_null_properties',
    'count_common_by_name',
    'count_common_by_name_and_declared_type',
    'count_common_by_name_and_value_type',
    'compare_objects',
    'render_report'
]
