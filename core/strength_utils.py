# core/strength_utils.py
from __future__ import annotations
import logging
import math
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_NUMBER_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile(r"[^A-Za-z0-9]")

MIN_LENGTH = 8
STRONG_LENGTH = 12
POINTS_PER_CHAR = 3.4
LENGTH_CAP = 40
POINTS_PER_CLASS = 15
MAX_SCORE = 100

# (ngưỡng trên, nhãn, class CSS của thanh)
_BUCKETS: List[Tuple[int, str, str]] = [
    (30, "Weak", "strength-bar-weak"),
    (60, "Medium", "strength-bar-medium"),
    (90, "Strong", "strength-bar-strong"),
]
_TOP_BUCKET = ("Very Strong", "strength-bar-very-strong")

BAR_COLORS: Dict[str, str] = {
    "strength-bar-weak": "#ef4444",
    "strength-bar-medium": "#f59e0b",
    "strength-bar-strong": "#22c55e",
    "strength-bar-very-strong": "#15803d",
}

CRITERIA_LABELS: List[Tuple[str, str]] = [
    ("has_length", "At least 8 characters"),
    ("has_upper", "Contains uppercase letters (A-Z)"),
    ("has_lower", "Contains lowercase letters (a-z)"),
    ("has_number", "Contains numbers (0-9)"),
    ("has_symbol", "Contains symbols (!@#...)"),
    ("has_length12", "12+ characters for extra strength"),
]


@dataclass(frozen=True)
class Criteria:
    has_length: bool = False
    has_upper: bool = False
    has_lower: bool = False
    has_number: bool = False
    has_symbol: bool = False
    has_length12: bool = False

    @property
    def variety(self) -> int:
        """Number of the four character classes present."""
        return sum((self.has_upper, self.has_lower, self.has_number, self.has_symbol))

    def as_dict(self) -> Dict[str, bool]:
        return {
            "hasLength": self.has_length,
            "hasUpper": self.has_upper,
            "hasLower": self.has_lower,
            "hasNumber": self.has_number,
            "hasSymbol": self.has_symbol,
            "hasLength12": self.has_length12,
        }


@dataclass(frozen=True)
class StrengthResult:
    score: int
    criteria: Criteria

    @property
    def label(self) -> str:
        return classify(self.score)

    def as_dict(self) -> dict:
        return {"score": self.score, "criteria": self.criteria.as_dict()}


def _round_half_up(x: float) -> int:
    # round() của Python là banker's rounding, 8.5 -> 8; ở đây cần 9
    return int(math.floor(x + 0.5))


def check_criteria(password: str) -> Criteria:
    n = len(password)
    return Criteria(
        has_length=n >= MIN_LENGTH,
        has_upper=bool(_UPPER_RE.search(password)),
        has_lower=bool(_LOWER_RE.search(password)),
        has_number=bool(_NUMBER_RE.search(password)),
        has_symbol=bool(_SYMBOL_RE.search(password)),
        has_length12=n >= STRONG_LENGTH,
    )


def evaluate(password: str) -> StrengthResult:
    """
    Score `password` from 0 to 100.

    Length gives up to 40 points (3.4 per character), each of the four
    character classes present gives 15. The sum is rounded half-up and
    capped at 100. An empty string scores 0 with every criterion false.
    """
    criteria = check_criteria(password)
    raw = min(len(password) * POINTS_PER_CHAR, LENGTH_CAP)
    raw += POINTS_PER_CLASS * criteria.variety
    score = min(_round_half_up(raw), MAX_SCORE)
    logger.debug("evaluated password: length=%d score=%d", len(password), score)
    return StrengthResult(score=score, criteria=criteria)


def _bucket(score: int) -> Tuple[str, str]:
    for upper, label, css in _BUCKETS:
        if score < upper:
            return label, css
    return _TOP_BUCKET


def classify(score: int) -> str:
    return _bucket(score)[0]


def strength_view(result: Optional[StrengthResult]) -> dict:
    """
    Map a strength result to what the page draws.

    `None` means there is no input and gives the reset state: empty bar,
    prompt text, every criterion unmet.
    """
    if result is None:
        criteria = Criteria()
        view = {
            "score": 0,
            "width": 0,
            "label": "Enter a password",
            "css_class": "",
            "color": None,
        }
    else:
        criteria = result.criteria
        label, css = _bucket(result.score)
        view = {
            "score": result.score,
            "width": result.score,
            "label": label,
            "css_class": css,
            "color": BAR_COLORS[css],
        }
    view["checks"] = [(text, getattr(criteria, attr)) for attr, text in CRITERIA_LABELS]
    return view
