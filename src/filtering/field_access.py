"""Field extraction from records of arbitrary shape.

Records do not share an interface. Values are looked up by dotted path
through mapping keys, dataclass field aliases, and public attributes.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from functools import lru_cache
from typing import Any, Protocol

from core.constants import FIELD_PATH_SEPARATOR
from core.errors import FieldNotFoundError, FilterFieldError


class FieldAccessor(Protocol):
    """Capability resolving a named field on a record."""

    def get_field_value(self, record: Any, field_name: str) -> Any:
        """Return the field value.

        Raises:
            FieldNotFoundError: If the field does not exist on the record.
            FilterFieldError: If the field name itself is malformed.
        """
        ...


class ReflectiveFieldAccessor:
    """Resolve dotted field paths by runtime introspection.

    Args:
        name_tag: Optional dataclass field metadata key. When set, tagged
            dataclass fields are addressed by ``metadata[name_tag]``
            instead of their attribute name.
    """

    def __init__(self, name_tag: str | None = None) -> None:
        self._name_tag = name_tag

    @property
    def name_tag(self) -> str | None:
        return self._name_tag

    def get_field_value(self, record: Any, field_name: str) -> Any:
        """Return the value at ``field_name`` on ``record``.

        Args:
            record: Mapping, dataclass, or plain object.
            field_name: Field name or dotted path such as ``"meta.score"``.

        Returns:
            Field value, which may be None.

        Raises:
            FieldNotFoundError: If any path segment does not resolve.
            FilterFieldError: If the path is empty or has empty segments.
        """
        if not isinstance(field_name, str):
            raise FilterFieldError(
                f"field name should be a string (got {field_name!r} "
                f"({type(field_name).__name__}))"
            )
        current = record
        for segment in split_field_path(field_name):
            if current is None:
                raise FieldNotFoundError(
                    f"field '{field_name}' not found: '{segment}' is below a null value"
                )
            current = self._resolve_segment(current, segment, field_name)
        return current

    def _resolve_segment(self, current: Any, segment: str, field_name: str) -> Any:
        if isinstance(current, Mapping):
            if segment in current:
                return current[segment]
            raise FieldNotFoundError(f"field '{field_name}' not found: no key '{segment}'")
        attribute_name = segment
        if self._name_tag and is_dataclass(current) and not isinstance(current, type):
            aliases = _dataclass_aliases(type(current), self._name_tag)
            if segment not in aliases:
                raise FieldNotFoundError(
                    f"field '{field_name}' not found on {type(current).__name__}"
                )
            attribute_name = aliases[segment]
        if attribute_name.startswith("_"):
            raise FieldNotFoundError(f"field '{field_name}' not found: '{segment}' is private")
        try:
            value = getattr(current, attribute_name)
        except AttributeError as error:
            raise FieldNotFoundError(
                f"field '{field_name}' not found on {type(current).__name__}"
            ) from error
        except Exception as error:
            raise FilterFieldError(
                f"failed reading field '{field_name}' on {type(current).__name__}: {error}"
            ) from error
        if _is_bound_method(value, current):
            raise FieldNotFoundError(f"field '{field_name}' not found: '{segment}' is a method")
        return value


@lru_cache(maxsize=1024)
def split_field_path(field_name: str) -> tuple[str, ...]:
    """Split a dotted field path into validated segments.

    Raises:
        FilterFieldError: If the path or any segment is empty.
    """
    segments = tuple(field_name.split(FIELD_PATH_SEPARATOR))
    if not field_name or any(not segment for segment in segments):
        raise FilterFieldError(
            f"invalid field path '{field_name}': segments must be non-empty. "
            "Use names like 'score' or 'meta.score'."
        )
    return segments


@lru_cache(maxsize=256)
def _dataclass_aliases(record_type: type, name_tag: str) -> dict[str, str]:
    aliases: dict[str, str] = {}
    for record_field in fields(record_type):
        alias = record_field.metadata.get(name_tag, record_field.name)
        aliases[str(alias)] = record_field.name
    return aliases


def _is_bound_method(value: Any, owner: Any) -> bool:
    if not (inspect.ismethod(value) or inspect.isbuiltin(value)):
        return False
    bound_to = getattr(value, "__self__", None)
    return bound_to is owner or bound_to is type(owner)
