"""
Typed configuration values.

Values are persisted as text in the INI file and decoded back into one of
four kinds: string, integer, float or bool.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

Scalar = Union[str, int, float, bool]

_TRUE_WORDS = ("true",)
_FALSE_WORDS = ("false",)


class ValueKind(Enum):
    """The closed set of value kinds a setting can hold."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOL = "bool"

    @classmethod
    def of(cls, value: Any) -> "ValueKind":
        """
        Get the kind of a Python value.

        Args:
            value: A str, int, float or bool

        Returns:
            Matching ValueKind

        Raises:
            TypeError: If the value is not one of the supported types
        """
        # bool is a subclass of int, so it must be checked first
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, float):
            return cls.FLOAT
        if isinstance(value, str):
            return cls.STRING
        raise TypeError(f"Unsupported setting type: {type(value).__name__}")


@dataclass(frozen=True)
class ConfigValue:
    """A setting value tagged with its kind."""

    kind: ValueKind
    value: Scalar

    @classmethod
    def of(cls, value: Any) -> "ConfigValue":
        return cls(ValueKind.of(value), value)

    def encode(self) -> str:
        """
        Get the text form written to the INI file.

        Returns:
            Text representation of the value
        """
        if self.kind is ValueKind.BOOL:
            return "true" if self.value else "false"
        if self.kind is ValueKind.FLOAT:
            return repr(float(self.value))
        return str(self.value)


def decode(text: str, kind: Optional[ValueKind] = None) -> Scalar:
    """
    Decode persisted text into a typed value.

    Without a kind the type is inferred from the textual form: true/false
    become bool, integer literals int, float literals float, anything
    else stays a string.

    Args:
        text: Text read from the INI file
        kind: Expected kind, or None to infer it

    Returns:
        Decoded value

    Raises:
        ValueError: If text cannot be decoded as the requested kind
    """
    if kind is None:
        return _infer(text)

    if kind is ValueKind.STRING:
        return text
    if kind is ValueKind.BOOL:
        word = text.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise ValueError(f"Not a boolean: {text!r}")
    if kind is ValueKind.INTEGER:
        return int(text.strip())
    return float(text.strip())


def coerce(raw: Any, kind: Optional[ValueKind] = None) -> Scalar:
    """
    Turn whatever the settings backend returned into a typed value.

    QSettings may hand back native Python values, text, or a list when an
    unquoted value contained commas.

    Args:
        raw: Raw value from the backend
        kind: Expected kind, or None to infer it

    Returns:
        Typed value

    Raises:
        ValueError: If the value is missing or does not fit the kind
    """
    if raw is None:
        raise ValueError("No value")

    if isinstance(raw, (list, tuple)):
        raw = ", ".join(str(part) for part in raw)

    if isinstance(raw, str):
        return decode(raw, kind)

    native = ValueKind.of(raw)
    if kind is None or kind is native:
        return raw
    return decode(ConfigValue(native, raw).encode(), kind)


def _infer(text: str) -> Scalar:
    word = text.strip()
    if word.lower() in _TRUE_WORDS:
        return True
    if word.lower() in _FALSE_WORDS:
        return False
    try:
        return int(word)
    except ValueError:
        pass
    try:
        return float(word)
    except ValueError:
        return text
