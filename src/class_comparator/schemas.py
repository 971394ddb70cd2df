"""
Pydantic schemas for introspected properties
"""
from pydantic import BaseModel, Field
from typing import Any, Callable, Dict, List, Optional, get_origin

# Marker for a type or value that could not be determined. Compared as a plain string.
NULL_SENTINEL = "null"


def type_identifier(tp: Any) -> str:
    """String identifier of a type or annotation"""
    if tp is None:
        return NULL_SENTINEL
    if isinstance(tp, str):
        # Forward reference kept as written
        return tp
    if isinstance(tp, type) and get_origin(tp) is None:
        if tp.__module__ == "builtins":
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)


class PropertyDescriptor(BaseModel):
    """Entry of a property table: how to find and read one property"""
    name: str
    declared_type: Optional[Any] = Field(None, description="Type or annotation, None if unknown")
    reader: Optional[Callable[[Any], Any]] = Field(None, description="Reads the value from an instance")

    class Config:
        frozen = True

    @classmethod
    def for_attribute(cls, name: str, declared_type: Any = None) -> "PropertyDescriptor":
        """
        Descriptor that reads a plain attribute

        An attribute that was never assigned (e.g. a dataclass field(init=False))
        reads as None: an unset value, reported as "null", not an access failure.
        """
        return cls(
            name=name,
            declared_type=declared_type,
            reader=lambda obj: getattr(obj, name, None)
        )

    @property
    def readable(self) -> bool:
        return self.reader is not None

    def read(self, obj: Any) -> Any:
        return self.reader(obj)


class Property(BaseModel):
    """A property discovered on one object"""
    name: str
    declared_type: str = NULL_SENTINEL
    # None: accessor was not (or could not be) invoked
    runtime_value_type: Optional[str] = None
    value: Any = Field(None, exclude=True)

    @property
    def has_value(self) -> bool:
        return self.runtime_value_type is not None and self.runtime_value_type != NULL_SENTINEL


class PropertySet(BaseModel):
    """All properties of one object at one point in time"""
    type_name: str
    properties: List[Property] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.properties)

    def names(self) -> List[str]:
        return [p.name for p in self.properties]

    def declared_types(self) -> Dict[str, str]:
        return {p.name: p.declared_type for p in sorted(self.properties, key=lambda p: p.name)}

    def value_types(self) -> Dict[str, str]:
        """Readable properties only"""
        return {
            p.name: p.runtime_value_type
            for p in sorted(self.properties, key=lambda p: p.name)
            if p.runtime_value_type is not None
        }

    def non_null_values(self) -> Dict[str, Any]:
        return {
            p.name: p.value
            for p in sorted(self.properties, key=lambda p: p.name)
            if p.has_value
        }


class ComparisonReport(BaseModel):
    """Counts of common properties between two objects"""
    left_type: str
    right_type: str
    left_properties: List[str] = Field(default_factory=list)
    right_properties: List[str] = Field(default_factory=list)
    by_name: int = Field(0, ge=0)
    by_name_and_declared_type: int = Field(0, ge=0)
    by_name_and_value_type: int = Field(0, ge=0)

    class Config:
        json_schema_extra = {
            "example": {
                "left_type": "__main__.Bean1",
                "right_type": "__main__.Bean2",
                "left_properties": ["id", "label"],
                "right_properties": ["id", "label"],
                "by_name": 2,
                "by_name_and_declared_type": 2,
                "by_name_and_value_type": 1
            }
        }
