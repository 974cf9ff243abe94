"""Radix rendering for the base converter.

Two interchangeable strategies render a non-negative integer in base 2 or 16:
the external ``bc`` calculator and a manual division loop. Both must return
byte-identical digit strings, so the choice between them is purely a matter
of what the host has installed.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from functools import lru_cache
from typing import Protocol

from modules.base_convert.core.numeral import Numeral, Radix
from universe.settings import env_choice, env_float

logger = logging.getLogger(__name__)

STRATEGY_CHOICES = ("auto", "bc", "manual")
DEFAULT_BC_PATH = "bc"
DEFAULT_BC_TIMEOUT = 5.0


def to_decimal(numeral: Numeral) -> int:
    alphabet = numeral.radix.alphabet
    base = int(numeral.radix)
    value = 0
    for char in numeral.digits:
        value = value * base + alphabet.index(char)
    return value


class RadixStrategy(Protocol):
    name: str

    def render(self, value: int, radix: Radix) -> str:
        ...


class ManualStrategy:
    name = "manual"

    def render(self, value: int, radix: Radix) -> str:
        if value < 0:
            raise ValueError("Only non-negative values can be rendered.")
        if value == 0:
            return "0"
        alphabet = radix.alphabet
        base = int(radix)
        digits = []
        while value > 0:
            value, remainder = divmod(value, base)
            digits.append(alphabet[remainder])
        return "".join(reversed(digits))


class BcStrategy:
    """Render through ``bc`` using ``obase``; falls back to the manual loop on failure."""

    name = "bc"

    def __init__(self, bc_path: str = DEFAULT_BC_PATH, timeout: float = DEFAULT_BC_TIMEOUT) -> None:
        self.bc_path = bc_path
        self.timeout = timeout
        self._fallback = ManualStrategy()

    def _run(self, value: int, radix: Radix) -> str | None:
        # str(int) is capped at 4300 digits on CPython 3.11+.
        decimal = self._fallback.render(value, Radix.DECIMAL)
        env = {**os.environ, "BC_LINE_LENGTH": "0"}
        try:
            result = subprocess.run(
                [self.bc_path],
                input=f"obase={int(radix)}\n{decimal}\n",
                capture_output=True,
                text=True,
                timeout=self.timeout,
                env=env,
            )
        except FileNotFoundError:
            logger.warning("%s not found; using built-in conversion.", self.bc_path)
            return None
        except subprocess.TimeoutExpired:
            logger.warning("%s timed out after %ss; using built-in conversion.", self.bc_path, self.timeout)
            return None
        except OSError as exc:
            logger.warning("%s failed to start (%s); using built-in conversion.", self.bc_path, exc)
            return None

        if result.returncode != 0:
            logger.warning(
                "%s exited with %s: %s",
                self.bc_path,
                result.returncode,
                result.stderr.strip(),
            )
            return None

        # bc before 1.07 ignores BC_LINE_LENGTH=0 and wraps long lines with a trailing backslash.
        output = result.stdout.replace("\\\n", "").strip()
        if not output or any(char not in radix.alphabet for char in output):
            logger.warning("%s returned unexpected output: %r", self.bc_path, result.stdout)
            return None
        return output

    def render(self, value: int, radix: Radix) -> str:
        if value < 0:
            raise ValueError("Only non-negative values can be rendered.")
        output = self._run(value, radix)
        if output is None:
            return self._fallback.render(value, radix)
        return output


def bc_executable(bc_path: str = DEFAULT_BC_PATH) -> str | None:
    return shutil.which(bc_path)


def select_strategy(
    preference: str = "auto",
    bc_path: str = DEFAULT_BC_PATH,
    timeout: float = DEFAULT_BC_TIMEOUT,
) -> RadixStrategy:
    if preference not in STRATEGY_CHOICES:
        raise ValueError(f"Strategy must be one of {list(STRATEGY_CHOICES)}, got '{preference}'.")

    if preference == "manual":
        logger.debug("Using manual radix conversion.")
        return ManualStrategy()

    resolved = bc_executable(bc_path)
    if resolved:
        logger.debug("Using %s for radix conversion.", resolved)
        return BcStrategy(resolved, timeout)

    if preference == "bc":
        logger.warning("%s requested but not found; calls will use built-in conversion.", bc_path)
        return BcStrategy(bc_path, timeout)

    logger.warning("%s not found; using built-in conversion.", bc_path)
    return ManualStrategy()


def configured_bc_path() -> str:
    return os.getenv("SPARKY_BC_PATH", "").strip() or DEFAULT_BC_PATH


def configured_preference() -> str:
    return env_choice("SPARKY_BASE_CONVERT_STRATEGY", STRATEGY_CHOICES, "auto")


@lru_cache(maxsize=1)
def default_strategy() -> RadixStrategy:
    return select_strategy(
        configured_preference(),
        configured_bc_path(),
        env_float("SPARKY_BC_TIMEOUT_SECONDS", DEFAULT_BC_TIMEOUT),
    )


def to_binary(value: int, strategy: RadixStrategy | None = None) -> str:
    return (strategy or default_strategy()).render(value, Radix.BINARY)


def to_hex(value: int, strategy: RadixStrategy | None = None) -> str:
    return (strategy or default_strategy()).render(value, Radix.HEXADECIMAL)
