"""
Field types shared by every model: tolerant timestamps, free-form JSON documents
and booleans the API sometimes sends as strings.
"""
import re
from datetime import datetime, timezone
from typing import Annotated, Any, Dict, Iterator, List, Optional

from pydantic import BeforeValidator, PlainSerializer
from pydantic_core import core_schema

_SPACE_SEPARATOR = re.compile(r"^(\d{4}-\d{2}-\d{2}) (\d{2}:\d{2})")
_FRACTION = re.compile(r"\.(\d+)")
_SHORT_OFFSET = re.compile(r"([+-]\d{2})$")
_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an API timestamp into a timezone-aware UTC datetime.

    Handles ISO 8601 (``Z`` or ``+00:00``) as well as the
    ``2025-12-07 05:59:36.458083+00`` form some endpoints return. Naive values
    are taken as UTC. Empty strings and None yield None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        text = _SPACE_SEPARATOR.sub(r"\1T\2", text)
        if text[-1] in "Zz":
            text = text[:-1] + "+00:00"
        elif _COMPACT_OFFSET.search(text) and "T" in text and ":" in text[text.index("T"):]:
            text = _COMPACT_OFFSET.sub(r"\1:\2", text)
        if _SHORT_OFFSET.search(text) and len(text) > 10:
            text = text + ":00"
        text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise ValueError(f"Unable to parse timestamp value: '{value}'") from e
    else:
        raise ValueError(f"Unable to parse timestamp from {type(value).__name__}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Canonical wire form: ISO 8601 in UTC with a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    if value.microsecond:
        return value.strftime("%Y-%m-%dT%H:%M:%S.%fZ")
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


def _parse_bool_or_string(value: Any) -> Any:
    if isinstance(value, bool) or value is None:
        return bool(value)
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("success", "true", "1"):
            return True
        if lowered in ("failure", "false", "0", ""):
            return False
    raise ValueError(f"Unable to convert '{value}' to boolean")


Timestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]

BoolOrString = Annotated[bool, BeforeValidator(_parse_bool_or_string)]


class JsonDocument:
    """
    Untyped JSON value with typed accessors.

    Wraps whatever the API returned (object, array or scalar). Callers that
    need structure convert explicitly via the accessors or ``raw``.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: Any):
        self._raw = raw

    @property
    def raw(self) -> Any:
        return self._raw

    @property
    def is_object(self) -> bool:
        return isinstance(self._raw, dict)

    @property
    def is_array(self) -> bool:
        return isinstance(self._raw, list)

    def get_property(self, name: str) -> Optional["JsonDocument"]:
        if not isinstance(self._raw, dict) or name not in self._raw:
            return None
        return JsonDocument(self._raw[name])

    def get_string(self, name: Optional[str] = None) -> Optional[str]:
        value = self._lookup(name)
        return value if isinstance(value, str) else None

    def get_int(self, name: Optional[str] = None) -> Optional[int]:
        value = self._lookup(name)
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return None

    def get_bool(self, name: Optional[str] = None) -> Optional[bool]:
        value = self._lookup(name)
        return value if isinstance(value, bool) else None

    def keys(self) -> List[str]:
        return list(self._raw.keys()) if isinstance(self._raw, dict) else []

    def __iter__(self) -> Iterator["JsonDocument"]:
        if isinstance(self._raw, list):
            return (JsonDocument(item) for item in self._raw)
        return iter(())

    def __len__(self) -> int:
        if isinstance(self._raw, (list, dict)):
            return len(self._raw)
        return 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JsonDocument):
            return self._raw == other._raw
        return self._raw == other

    def __hash__(self) -> int:
        return hash(repr(self._raw))

    def __repr__(self) -> str:
        return f"JsonDocument({self._raw!r})"

    def _lookup(self, name: Optional[str]) -> Any:
        if name is None:
            return self._raw
        if isinstance(self._raw, dict):
            return self._raw.get(name)
        return None

    @classmethod
    def _validate(cls, value: Any) -> "JsonDocument":
        if isinstance(value, JsonDocument):
            return value
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: v.raw if isinstance(v, JsonDocument) else v, when_used="always"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> Dict[str, Any]:
        return {}


