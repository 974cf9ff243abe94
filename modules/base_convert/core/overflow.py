from __future__ import annotations

import logging
import struct

from modules.base_convert.core.result import OverflowWarning
from universe.settings import env_int

logger = logging.getLogger(__name__)

NARROW_WORD_BITS = 32
MAX_SAFE_BITS = 31


def native_word_bits() -> int:
    override = env_int("SPARKY_NATIVE_WORD_BITS", None)
    if override:
        return override
    return struct.calcsize("P") * 8


def check_overflow(binary_digits: str, word_bits: int) -> OverflowWarning | None:
    """Advise when a binary input is longer than a signed 32-bit word holds.

    Informational only: conversion always proceeds with arbitrary precision.
    """
    bit_length = len(binary_digits)
    if bit_length <= MAX_SAFE_BITS or word_bits != NARROW_WORD_BITS:
        return None
    logger.info("Binary input of %s bits on a %s-bit host.", bit_length, word_bits)
    return OverflowWarning(
        triggered=True,
        message="Number may be too large for a 32-bit system.",
        bit_length=bit_length,
        native_word_bits=word_bits,
    )
