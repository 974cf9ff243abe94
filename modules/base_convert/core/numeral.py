from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Radix(IntEnum):
    BINARY = 2
    DECIMAL = 10
    HEXADECIMAL = 16

    @property
    def alphabet(self) -> str:
        return "0123456789ABCDEF"[: int(self)]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, raw: object) -> "Radix":
        key = str(raw).strip().lower() if raw is not None else ""
        radix = _ALIASES.get(key)
        if radix is None:
            raise ValueError(f"Unsupported base: {raw!r}. Use 2, 10 or 16.")
        return radix


_LABELS = {
    Radix.BINARY: "Binary",
    Radix.DECIMAL: "Decimal",
    Radix.HEXADECIMAL: "Hexadecimal",
}

_ALIASES = {
    "2": Radix.BINARY,
    "bin": Radix.BINARY,
    "binary": Radix.BINARY,
    "10": Radix.DECIMAL,
    "dec": Radix.DECIMAL,
    "decimal": Radix.DECIMAL,
    "16": Radix.HEXADECIMAL,
    "hex": Radix.HEXADECIMAL,
    "hexadecimal": Radix.HEXADECIMAL,
}


class ValidationErrorKind(Enum):
    EMPTY_INPUT = "empty_input"
    INVALID_DIGIT = "invalid_digit"


class ValidationError(ValueError):
    """Rejected user input; recoverable, the caller re-prompts."""

    def __init__(
        self,
        kind: ValidationErrorKind,
        message: str,
        *,
        char: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.char = char
        self.position = position

    def as_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"error": self.message, "kind": self.kind.value}
        if self.char is not None:
            payload["char"] = self.char
            payload["position"] = self.position
        return payload


HEX_INPUT_ALPHABET = "0123456789abcdefABCDEF"


def _check_digits(digits: str, radix: Radix, allowed: str | None = None) -> None:
    if not digits:
        raise ValidationError(
            ValidationErrorKind.EMPTY_INPUT,
            f"{radix.label} value is required.",
        )
    allowed = allowed or radix.alphabet
    for position, char in enumerate(digits):
        if char not in allowed:
            raise ValidationError(
                ValidationErrorKind.INVALID_DIGIT,
                f"Invalid digit for base {int(radix)}: {char}",
                char=char,
                position=position,
            )


@dataclass(frozen=True)
class Numeral:
    radix: Radix
    digits: str

    def __post_init__(self) -> None:
        _check_digits(self.digits, self.radix)

    def __str__(self) -> str:
        return self.digits


def validate(text: object, radix: Radix | int) -> Numeral:
    """Parse raw user text into a Numeral of the given radix.

    Surrounding whitespace is ignored and hexadecimal digits are
    canonicalized to uppercase. Anything else outside the radix alphabet,
    including prefixes and signs, rejects the whole input.
    """
    radix = Radix(radix)
    raw = "" if text is None else str(text).strip()
    if radix is Radix.HEXADECIMAL:
        _check_digits(raw, radix, HEX_INPUT_ALPHABET)
        raw = raw.upper()
    return Numeral(radix, raw)
