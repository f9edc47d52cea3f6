"""
Path and query-string construction.

Path segments are percent-encoded one at a time so identifiers containing
``/`` or ``#`` can never change the shape of the URL. Query strings are kept
as ordered pairs so array filters can repeat a key.
"""
import enum
import string
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import quote

from pydantic import BaseModel

from .json_types import format_timestamp
from .open_enum import OpenEnum

_FORMATTER = string.Formatter()


class QueryNaming(enum.Enum):
    """How a filter field name is spelled on the wire."""
    UNDERSCORE = "underscore"  # actor_email
    DOTTED = "dotted"  # actor.email


def encode_segment(value: Any) -> str:
    return quote(format_value(value), safe="")


def build_path(template: str, **segments: Any) -> str:
    """
    Fill ``{name}`` placeholders in ``template`` with percent-encoded values.

        build_path("zones/{zone_id}/dns_records/{record_id}", zone_id="z", record_id="a/b")
        # -> "zones/z/dns_records/a%2Fb"
    """
    parts: List[str] = []
    for literal, field_name, _spec, _conv in _FORMATTER.parse(template):
        parts.append(literal)
        if field_name is None:
            continue
        if field_name not in segments:
            raise KeyError(f"Missing path segment '{field_name}' for template '{template}'")
        parts.append(encode_segment(segments[field_name]))
    return "".join(parts)


def format_value(value: Any) -> str:
    """Canonical wire text for a single query or path value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, OpenEnum):
        return value.value
    if isinstance(value, enum.Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def wire_name(field_name: str, convention: QueryNaming) -> str:
    if convention is QueryNaming.DOTTED:
        return field_name.replace("_", ".")
    return field_name


class QueryBuilder:
    """Accumulates ordered query pairs and renders them as ``?k=v&k=v``."""

    def __init__(self) -> None:
        self._pairs: List[Tuple[str, str]] = []

    def add(self, key: str, value: Any) -> "QueryBuilder":
        if value is None:
            return self
        if isinstance(value, (list, tuple, set, frozenset)):
            return self.add_all(key, value)
        self._pairs.append((key, format_value(value)))
        return self

    def add_all(self, key: str, values: Optional[Iterable[Any]]) -> "QueryBuilder":
        if not values:
            return self
        for value in values:
            if value is not None:
                self._pairs.append((key, format_value(value)))
        return self

    def add_filters(
        self,
        filters: Optional[BaseModel],
        convention: QueryNaming = QueryNaming.UNDERSCORE,
    ) -> "QueryBuilder":
        """Add every non-None field of a filter model, in declaration order."""
        if filters is None:
            return self
        for name, info in type(filters).model_fields.items():
            value = getattr(filters, name)
            if value is None:
                continue
            key = info.serialization_alias or info.alias or wire_name(name, convention)
            self.add(key, value)
        return self

    @property
    def pairs(self) -> List[Tuple[str, str]]:
        return list(self._pairs)

    def build(self) -> str:
        return render_query(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)


def build_headers(headers: Mapping[str, Optional[Any]]) -> Dict[str, str]:
    """Drop headers whose value is None; format the rest."""
    return {name: format_value(value) for name, value in headers.items() if value is not None}


def render_query(pairs: Iterable[Tuple[str, str]]) -> str:
    """``""`` for no pairs, else ``?k=v&k=v`` with both sides percent-encoded."""
    encoded = [f"{quote(k, safe='.')}={quote(v, safe='')}" for k, v in pairs]
    if not encoded:
        return ""
    return "?" + "&".join(encoded)
