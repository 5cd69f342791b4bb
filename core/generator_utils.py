# core/generator_utils.py
from __future__ import annotations
import enum
import logging
import math
import random
import secrets
from dataclasses import dataclass
from typing import List, Tuple

logger = logging.getLogger(__name__)


class CharClass(enum.Enum):
    UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    LOWER = "abcdefghijklmnopqrstuvwxyz"
    NUMBER = "0123456789"
    SYMBOL = "!@#$%^&*()_+~`|}{[]:;?><,./-="

    @property
    def chars(self) -> str:
        return self.value


# Thứ tự cố định khi ghép pool
CANONICAL_ORDER: Tuple[CharClass, ...] = (
    CharClass.UPPER,
    CharClass.LOWER,
    CharClass.NUMBER,
    CharClass.SYMBOL,
)


class GenerationError(ValueError):
    """Base for user-correctable generator input errors."""


class NoCharsetSelected(GenerationError):
    def __init__(self, message: str = "Please select at least one character set."):
        super().__init__(message)


class LengthTooShort(GenerationError):
    def __init__(self, length: int, required: int):
        super().__init__(
            f"Length ({length}) is too short for {required} required character sets."
        )
        self.length = length
        self.required = required


@dataclass(frozen=True)
class GeneratorConfig:
    length: int
    include_upper: bool = True
    include_lower: bool = True
    include_number: bool = True
    include_symbol: bool = True

    def enabled_classes(self) -> List[CharClass]:
        flags = {
            CharClass.UPPER: self.include_upper,
            CharClass.LOWER: self.include_lower,
            CharClass.NUMBER: self.include_number,
            CharClass.SYMBOL: self.include_symbol,
        }
        return [c for c in CANONICAL_ORDER if flags[c]]


def build_pool(config: GeneratorConfig) -> Tuple[List[str], str]:
    """
    Returns (groups, pool) where:
      - groups: character set of every enabled class, canonical order
      - pool: the groups concatenated
    """
    groups = [c.chars for c in config.enabled_classes()]
    return groups, "".join(groups)


def generate(config: GeneratorConfig) -> str:
    """
    Generate a password of `config.length` with at least one character from
    every enabled class.

    Raises NoCharsetSelected when no class is enabled and LengthTooShort when
    the length cannot hold one character per enabled class.
    """
    groups, pool = build_pool(config)
    if not groups:
        raise NoCharsetSelected()
    if config.length < len(groups):
        raise LengthTooShort(config.length, len(groups))

    sysrand = random.SystemRandom()
    pw_chars = [secrets.choice(grp) for grp in groups]  # đảm bảo mỗi nhóm có mặt
    for _ in range(config.length - len(groups)):
        pw_chars.append(secrets.choice(pool))
    sysrand.shuffle(pw_chars)

    logger.info(
        "generated password: length=%d classes=%s",
        config.length,
        ",".join(c.name.lower() for c in config.enabled_classes()),
    )
    return "".join(pw_chars)


def entropy_bits(config: GeneratorConfig) -> float:
    """Entropy of a password drawn from the pool of `config`, in bits."""
    _, pool = build_pool(config)
    if config.length <= 0 or len(pool) <= 1:
        return 0.0
    return config.length * math.log2(len(pool))


# Nhãn entropy, tách biệt với nhãn điểm của strength_utils
_ENTROPY_LEVELS: Tuple[Tuple[float, str], ...] = (
    (50, "low entropy"),
    (80, "fair entropy"),
    (110, "high entropy"),
)


def entropy_label(bits: float) -> str:
    for upper, label in _ENTROPY_LEVELS:
        if bits < upper:
            return label
    return "very high entropy"
