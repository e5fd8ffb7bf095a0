"""Field Descriptions

How the walker learns a record's fields and their rule declarations.
Sources, first match wins:

1. ``__validation_fields__()`` classmethod on the type
2. ``register_shape(cls, fields)`` for types you cannot edit
3. dataclass fields carrying the declaration in ``metadata``
4. pydantic models carrying it in ``json_schema_extra``

Usage:
    @dataclass
    class User:
        email: str = tag("required,email")
        age: int = tag("range(18|130)", default=0)

    class Account(BaseModel):
        slug: str = Field("", valid="alphanum,length(3|32)")

Descriptions are cached per (type, tag name); the declarations themselves
are parsed again on every validation call.
"""
from __future__ import annotations

import dataclasses
import threading
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Iterable, Mapping

from pydantic import BaseModel, Field as PydanticField

DEFAULT_TAG_NAME = "valid"

_shapes: dict[type, tuple[FieldSpec, ...]] = {}
_shapes_lock = threading.Lock()


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One field of a record: its name, how to read it and its declaration."""
    name: str
    tag: str | None = None
    accessor: Callable[[Any], Any] | None = None

    def get(self, obj: Any) -> Any:
        return self.accessor(obj) if self.accessor is not None else getattr(obj, self.name, None)


def _as_specs(fields: Mapping[str, str | None] | Iterable[FieldSpec | tuple]) -> tuple[FieldSpec, ...]:
    if isinstance(fields, Mapping): return tuple(FieldSpec(name, tag) for name, tag in fields.items())
    return tuple(f if isinstance(f, FieldSpec) else FieldSpec(*f) for f in fields)


def register_shape(cls: type, fields: Mapping[str, str | None] | Iterable[FieldSpec | tuple]) -> None:
    """Describe a type from outside, e.g. ``register_shape(Point, {"x": "int", "y": "int"})``.

    Later registrations for the same type replace earlier ones.
    """
    if not isinstance(cls, type): raise TypeError(f"register_shape expects a class, got {type(cls).__name__}")
    specs = _as_specs(fields)
    with _shapes_lock:
        _shapes[cls] = specs


def unregister_shape(cls: type) -> None:
    with _shapes_lock:
        _shapes.pop(cls, None)


def tag(rules: str, *, tag_name: str = DEFAULT_TAG_NAME, **kwargs) -> Any:
    """dataclasses.field() carrying a rule declaration."""
    metadata = {**kwargs.pop("metadata", {}), tag_name: rules}
    return dataclasses.field(metadata=metadata, **kwargs)


def Field(default: Any = ..., *, valid: str | None = None, tag_name: str = DEFAULT_TAG_NAME, **kwargs) -> Any:
    """pydantic Field with a rule declaration stored in json_schema_extra.

    Args:
        default: Default value or ... for required
        valid: Rule declaration, e.g. ``"required,email"``
        tag_name: Key the declaration is stored under
    """
    schema_extra = dict(kwargs.pop("json_schema_extra", None) or {})
    if valid is not None:
        schema_extra[tag_name] = valid
    if schema_extra:
        kwargs["json_schema_extra"] = schema_extra
    return PydanticField(default, **kwargs)


def _from_dataclass(cls: type, tag_name: str) -> tuple[FieldSpec, ...]:
    return tuple(FieldSpec(f.name, f.metadata.get(tag_name)) for f in dataclasses.fields(cls))


def _from_pydantic(cls: type[BaseModel], tag_name: str) -> tuple[FieldSpec, ...]:
    specs = []
    for name, info in cls.model_fields.items():
        extra = info.json_schema_extra
        specs.append(FieldSpec(name, extra.get(tag_name) if isinstance(extra, dict) else None))
    return tuple(specs)


@lru_cache(maxsize=1024)
def _describe(cls: type, tag_name: str) -> tuple[FieldSpec, ...] | None:
    if callable(hook := getattr(cls, "__validation_fields__", None)):
        return _as_specs(hook())
    if dataclasses.is_dataclass(cls):
        return _from_dataclass(cls, tag_name)
    if issubclass(cls, BaseModel):
        return _from_pydantic(cls, tag_name)
    return None


def describe(cls: type, tag_name: str = DEFAULT_TAG_NAME) -> tuple[FieldSpec, ...] | None:
    """Field descriptions for a type, or None if it is not a described record."""
    if not isinstance(cls, type): return None
    if not callable(getattr(cls, "__validation_fields__", None)):
        # Registered shapes stay outside the cache so (un)registration takes effect at once.
        with _shapes_lock:
            shape = _shapes.get(cls)
        if shape is not None: return shape
    return _describe(cls, tag_name)


def is_record(value: Any, tag_name: str = DEFAULT_TAG_NAME) -> bool:
    """True for instances of described types. Classes themselves are never records."""
    return not isinstance(value, type) and describe(type(value), tag_name) is not None
