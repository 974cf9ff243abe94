from __future__ import annotations

from typing import Dict, Tuple

from modules.base_convert.core.numeral import Numeral, Radix, ValidationError, validate
from modules.base_convert.core.overflow import check_overflow, native_word_bits
from modules.base_convert.core.radix import ManualStrategy, RadixStrategy, default_strategy, to_decimal
from modules.base_convert.core.result import ConversionResult


def convert(
    text: object,
    radix: Radix | int,
    *,
    strategy: RadixStrategy | None = None,
    word_bits: int | None = None,
) -> ConversionResult:
    numeral = validate(text, radix)
    strategy = strategy or default_strategy()
    value = to_decimal(numeral)

    targets: Dict[Radix, Numeral] = {}
    for target in Radix:
        if target is numeral.radix:
            continue
        if target is Radix.DECIMAL:
            digits = ManualStrategy().render(value, Radix.DECIMAL)
        else:
            digits = strategy.render(value, target)
        targets[target] = Numeral(target, digits)

    warning = None
    if numeral.radix is Radix.BINARY:
        bits = word_bits if word_bits is not None else native_word_bits()
        warning = check_overflow(numeral.digits, bits)

    return ConversionResult(
        source=numeral,
        value=value,
        targets=targets,
        warning=warning,
        strategy=strategy.name,
    )


def from_decimal(text: object, **kwargs) -> ConversionResult:
    return convert(text, Radix.DECIMAL, **kwargs)


def from_binary(text: object, **kwargs) -> ConversionResult:
    return convert(text, Radix.BINARY, **kwargs)


def from_hex(text: object, **kwargs) -> ConversionResult:
    return convert(text, Radix.HEXADECIMAL, **kwargs)


def _parse_base(value: object) -> Tuple[Radix | None, Dict[str, object] | None]:
    if value is None or not str(value).strip():
        return None, {"error": "From base is required.", "kind": "invalid_base"}
    try:
        return Radix.parse(value), None
    except ValueError as exc:
        return None, {"error": str(exc), "kind": "invalid_base"}


def convert_base(
    value: object,
    base_from: object,
    *,
    strategy: RadixStrategy | None = None,
) -> Tuple[Dict[str, object] | None, Dict[str, object] | None]:
    radix, error = _parse_base(base_from)
    if error or radix is None:
        return None, error

    try:
        result = convert(value, radix, strategy=strategy)
    except ValidationError as exc:
        return None, exc.as_dict()
    return result.as_dict(), None
