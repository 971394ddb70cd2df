"""
Describable capability: how a type exposes its properties

A type can supply its own descriptor table (Describable). Everything else
is discovered by reflection over:
- pydantic model fields
- dataclass fields
- NamedTuple fields
- @property getters (declared type = return annotation)
"""
import dataclasses
import inspect
import typing
from typing import Any, Dict, List, Optional, Protocol, Sequence, runtime_checkable

from loguru import logger
from pydantic import BaseModel

from .schemas import PropertyDescriptor

# Their own members are never properties of a subclass
_OPAQUE_BASES = (object, BaseModel)


class IntrospectionError(Exception):
    """The shape of a type cannot be analyzed"""


@runtime_checkable
class Describable(Protocol):
    """
    Explicit property table

    Example:
        class Point:
            def __init__(self, x: int):
                self.x = x

            @classmethod
            def describe_properties(cls):
                return [PropertyDescriptor.for_attribute("x", int)]
    """

    @classmethod
    def describe_properties(cls) -> Sequence[PropertyDescriptor]:
        ...


def describe_type(cls: type) -> List[PropertyDescriptor]:
    """
    Property descriptors of a type, in discovery order

    Raises:
        IntrospectionError: if the type cannot be analyzed at all
    """
    try:
        if issubclass(cls, Describable):
            descriptors = list(cls.describe_properties())
        else:
            descriptors = _reflect(cls)

        seen = set()
        for descriptor in descriptors:
            if not isinstance(descriptor, PropertyDescriptor):
                raise IntrospectionError(f"{cls.__qualname__}: not a PropertyDescriptor: {descriptor!r}")
            if descriptor.name in seen:
                raise IntrospectionError(f"{cls.__qualname__}: duplicate property '{descriptor.name}'")
            seen.add(descriptor.name)
    except IntrospectionError:
        raise
    except Exception as e:
        raise IntrospectionError(f"Cannot analyze {cls!r}: {e}") from e

    return descriptors


def _reflect(cls: type) -> List[PropertyDescriptor]:
    found: Dict[str, Optional[PropertyDescriptor]] = {}

    # 1. Declared fields
    if issubclass(cls, BaseModel):
        for name, info in cls.model_fields.items():
            found[name] = PropertyDescriptor.for_attribute(name, info.annotation)
    elif dataclasses.is_dataclass(cls):
        hints = _type_hints(cls)
        for f in dataclasses.fields(cls):
            declared = hints[f.name] if f.name in hints else _field_hint(cls, f.name, f.type)
            found[f.name] = PropertyDescriptor.for_attribute(f.name, declared)
    elif issubclass(cls, tuple) and hasattr(cls, "_fields"):
        hints = _type_hints(cls)
        raw = _raw_annotations(cls)
        for name in cls._fields:
            declared = hints[name] if name in hints else _field_hint(cls, name, raw.get(name))
            found[name] = PropertyDescriptor.for_attribute(name, declared)

    # 2. Properties, base classes first
    for klass in reversed(cls.__mro__):
        if klass in _OPAQUE_BASES:
            continue
        for name, member in vars(klass).items():
            if isinstance(member, property) and name not in found:
                found[name] = None

    for name, descriptor in found.items():
        if descriptor is not None:
            continue
        # Most derived definition wins
        member = inspect.getattr_static(cls, name, None)
        if isinstance(member, property):
            found[name] = PropertyDescriptor(
                name=name,
                declared_type=_return_type(member.fget),
                reader=member.fget
            )

    return [
        descriptor for name, descriptor in found.items()
        if descriptor is not None and not name.startswith("_")
    ]


def _type_hints(cls: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except Exception as e:
        logger.debug(f"Unresolved annotations on {cls.__qualname__}: {e}")
        return {}


def _raw_annotations(cls: type) -> Dict[str, Any]:
    try:
        return dict(getattr(cls, "__annotations__", {}))
    except Exception as e:
        logger.debug(f"Unreadable annotations on {cls.__qualname__}: {e}")
        return {}


def _field_hint(cls: type, name: str, annotation: Any) -> Any:
    """
    Resolves one field annotation on its own

    Used when the class as a whole has an unresolvable annotation, so the
    other fields keep their declared types. None if this one fails too.
    """
    if isinstance(annotation, typing.ForwardRef):
        # NamedTuple keeps string annotations as ForwardRef
        annotation = annotation.__forward_arg__
    if not isinstance(annotation, str):
        return annotation
    # Single-field stand-in, evaluated in the module of cls
    holder = type(cls.__name__, (), {"__annotations__": {name: annotation}, "__module__": cls.__module__})
    try:
        return typing.get_type_hints(holder, localns=dict(vars(cls)))[name]
    except Exception as e:
        logger.debug(f"Unresolved annotation {cls.__qualname__}.{name}: {e}")
        return None


def _return_type(getter: Optional[typing.Callable]) -> Any:
    """Declared return type of a getter, None if it has none"""
    if getter is None:
        return None
    try:
        hints = typing.get_type_hints(getter)
    except Exception as e:
        logger.debug(f"Unresolved return annotation on {getattr(getter, '__qualname__', getter)!r}: {e}")
        return None
    return hints.get("return")
