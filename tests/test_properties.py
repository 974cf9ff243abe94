"""Property-based checks for radix conversion.

Round trips through binary and hexadecimal must return the original value,
and the manual division loop must agree with both Python's own formatting
and the external bc evaluator.
"""
from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from modules.base_convert.core.base import from_decimal
from modules.base_convert.core.numeral import Numeral, Radix
from modules.base_convert.core.radix import BcStrategy, ManualStrategy, to_binary, to_decimal, to_hex

from conftest import requires_bc

values = st.integers(min_value=0, max_value=2**256)
MANUAL = ManualStrategy()


@given(value=values)
def test_binary_round_trip(value: int) -> None:
    assert to_decimal(Numeral(Radix.BINARY, to_binary(value, MANUAL))) == value


@given(value=values)
def test_hex_round_trip(value: int) -> None:
    assert to_decimal(Numeral(Radix.HEXADECIMAL, to_hex(value, MANUAL))) == value


@given(value=values)
def test_manual_matches_builtin_formatting(value: int) -> None:
    assert to_binary(value, MANUAL) == format(value, "b")
    assert to_hex(value, MANUAL) == format(value, "X")


@given(value=values)
def test_decimal_input_round_trips(value: int) -> None:
    result = from_decimal(str(value), strategy=MANUAL)
    assert int(result.binary, 2) == value
    assert int(result.hex, 16) == value


@requires_bc
@settings(max_examples=50, deadline=None)
@given(value=values)
def test_bc_and_manual_agree(value: int) -> None:
    bc = BcStrategy()
    assert bc.render(value, Radix.BINARY) == MANUAL.render(value, Radix.BINARY)
    assert bc.render(value, Radix.HEXADECIMAL) == MANUAL.render(value, Radix.HEXADECIMAL)
