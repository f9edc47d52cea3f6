"""
Open (extensible) string enums.

An OpenEnum behaves like a closed set of named constants for known values while
still accepting, comparing and round-tripping any other string the API returns.

    class ZoneStatus(OpenEnum):
        ACTIVE = "active"
        PENDING = "pending"

    ZoneStatus.ACTIVE == ZoneStatus.of("ACTIVE")   # True
    ZoneStatus.of("brand-new").value               # "brand-new"
"""
from typing import Any, ClassVar, Dict, List, Optional, Type, TypeVar

from pydantic_core import core_schema

E = TypeVar("E", bound="OpenEnum")


class OpenEnum:
    """
    Base class for string-valued enums that tolerate unknown values.

    Upper-case string attributes declared on a subclass become instances of
    that subclass. Equality and hashing use the lower-cased value. Plain
    strings never compare equal; wrap them with ``of`` first.
    """

    __slots__ = ("_value",)

    _known: ClassVar[Dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        known: Dict[str, str] = {}
        for name, literal in list(vars(cls).items()):
            if name.startswith("_") or not name.isupper() or not isinstance(literal, str):
                continue
            known[literal.lower()] = literal
            setattr(cls, name, cls(literal))
        cls._known = known

    def __init__(self, value: str):
        if value is None:
            raise TypeError(f"{type(self).__name__} value must not be None")
        if not isinstance(value, str):
            raise TypeError(f"{type(self).__name__} value must be a str, got {type(value).__name__}")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def of(cls: Type[E], value: str) -> E:
        """Explicit factory from a plain string."""
        return cls(value)

    @classmethod
    def empty(cls: Type[E]) -> E:
        """The default instance, distinct from every named constant."""
        return cls("")

    @classmethod
    def known_values(cls: Type[E]) -> List[E]:
        return [cls(literal) for literal in cls._known.values()]

    @property
    def value(self) -> str:
        return self._value

    @property
    def is_empty(self) -> bool:
        return self._value == ""

    @property
    def is_known(self) -> bool:
        return self._value.lower() in self._known

    def serialize(self) -> str:
        """Wire form: the canonical literal for known values, verbatim otherwise."""
        return self._known.get(self._value.lower(), self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OpenEnum):
            if type(other) is not type(self):
                return False
            return self._value.lower() == other._value.lower()
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self._value.lower())

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __reduce__(self):
        return (type(self), (self._value,))

    # pydantic integration

    @classmethod
    def _validate(cls: Type[E], value: Any) -> E:
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.empty()
        if isinstance(value, str):
            return cls(value)
        raise ValueError(f"{cls.__name__} expects a string, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_open_enum, when_used="always"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> Dict[str, Any]:
        json_schema: Dict[str, Any] = {"type": "string"}
        if cls._known:
            json_schema["examples"] = list(cls._known.values())
        return json_schema


def _serialize_open_enum(value: Any) -> Optional[str]:
    if isinstance(value, OpenEnum):
        return value.serialize()
    return value
