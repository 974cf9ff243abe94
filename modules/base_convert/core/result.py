from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from modules.base_convert.core.numeral import Numeral, Radix


@dataclass(frozen=True)
class OverflowWarning:
    triggered: bool
    message: str
    bit_length: int
    native_word_bits: int

    def as_dict(self) -> Dict[str, object]:
        return {
            "triggered": self.triggered,
            "message": self.message,
            "bit_length": self.bit_length,
            "native_word_bits": self.native_word_bits,
        }


@dataclass(frozen=True)
class ConversionResult:
    source: Numeral
    value: int
    targets: Dict[Radix, Numeral] = field(default_factory=dict)
    warning: OverflowWarning | None = None
    strategy: str = "manual"

    def digits_for(self, radix: Radix) -> str:
        if radix is self.source.radix:
            return self.source.digits
        return self.targets[radix].digits

    @property
    def decimal(self) -> str:
        return self.digits_for(Radix.DECIMAL)

    @property
    def binary(self) -> str:
        return self.digits_for(Radix.BINARY)

    @property
    def hex(self) -> str:
        return self.digits_for(Radix.HEXADECIMAL)

    def as_dict(self) -> Dict[str, object]:
        return {
            "input": self.source.digits,
            "base_from": int(self.source.radix),
            "decimal": self.decimal,
            "binary": self.binary,
            "hex": self.hex,
            "strategy": self.strategy,
            "warning": self.warning.as_dict() if self.warning else None,
        }
