"""Detector for North American style phone numbers.

Only a closed set of layouts is accepted for each length; digits mixed with
arbitrary separators (``890 123 4567``) are rejected. The whole trimmed input
must be the number.

========  ==========================================================
Length    Accepted layouts
========  ==========================================================
7         ``DDDDDDD``, ``DDD-DDDD``, ``DDD.DDDD``
10        ``DDDDDDDDDD``, ``DDD-DDD-DDDD``, ``DDD.DDD.DDDD``,
          ``(DDD) DDD-DDDD``, ``(DDD)DDD-DDDD``, ``(DDD)DDDDDDD``
11 (US)   ``1DDDDDDDDDD``, ``1-DDD-DDD-DDDD``, ``1.DDD.DDD.DDDD``,
          ``1 (DDD) DDD-DDDD``, ``1(DDD)DDD-DDDD``, ``1(DDD)DDDDDDD``
11 intl   the same layouts with ``+D`` in place of the leading ``1``
========  ==========================================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from ..config import LinkConfig
from ..models import Detection, DetectionKind, PhoneDetection

EXACT_MATCH_CONFIDENCE = 95
PARTIAL_MATCH_CONFIDENCE = 60

_SEVEN_DIGIT_PATTERNS = (
    re.compile(r"(\d{7})", re.ASCII),
    re.compile(r"(\d{3})-(\d{4})", re.ASCII),
    re.compile(r"(\d{3})\.(\d{4})", re.ASCII),
)

_TEN_DIGIT_PATTERNS = (
    re.compile(r"(\d{10})", re.ASCII),
    re.compile(r"(\d{3})-(\d{3})-(\d{4})", re.ASCII),
    re.compile(r"(\d{3})\.(\d{3})\.(\d{4})", re.ASCII),
    re.compile(r"\((\d{3})\) (\d{3})-(\d{4})", re.ASCII),
    re.compile(r"\((\d{3})\)(\d{3})-(\d{4})", re.ASCII),
    re.compile(r"\((\d{3})\)(\d{7})", re.ASCII),
)

_US_PATTERNS = (
    re.compile(r"(1)(\d{10})", re.ASCII),
    re.compile(r"(1)-(\d{3})-(\d{3})-(\d{4})", re.ASCII),
    re.compile(r"(1)\.(\d{3})\.(\d{3})\.(\d{4})", re.ASCII),
    re.compile(r"(1) \((\d{3})\) (\d{3})-(\d{4})", re.ASCII),
    re.compile(r"(1)\((\d{3})\)(\d{3})-(\d{4})", re.ASCII),
    re.compile(r"(1)\((\d{3})\)(\d{7})", re.ASCII),
)

_INTERNATIONAL_PATTERNS = (
    re.compile(r"\+(\d)(\d{10})", re.ASCII),
    re.compile(r"\+(\d)-(\d{3})-(\d{3})-(\d{4})", re.ASCII),
    re.compile(r"\+(\d)\.(\d{3})\.(\d{3})\.(\d{4})", re.ASCII),
    re.compile(r"\+(\d) \((\d{3})\) (\d{3})-(\d{4})", re.ASCII),
    re.compile(r"\+(\d)\((\d{3})\)(\d{3})-(\d{4})", re.ASCII),
    re.compile(r"\+(\d)\((\d{3})\)(\d{7})", re.ASCII),
)


@dataclass(frozen=True)
class PhoneMatch:
    """A phone number matched against one of the accepted layouts."""

    kind: DetectionKind
    raw_number: str
    formatted_display: str
    tel_url: str


def detect_phone(text: str, config: LinkConfig) -> Optional[Detection]:
    """Recognize a phone number spanning the whole trimmed input."""
    match = match_phone_number(text)
    if match is None:
        return None

    is_exact = text.strip() == match.raw_number
    return PhoneDetection(
        original_input=text,
        confidence=EXACT_MATCH_CONFIDENCE if is_exact else PARTIAL_MATCH_CONFIDENCE,
        kind=match.kind,
        raw_number=match.raw_number,
        formatted_display=match.formatted_display,
        tel_url=match.tel_url,
        is_exact_match=is_exact,
    )


def match_phone_number(text: str) -> Optional[PhoneMatch]:
    """Try the 7, 10 and 11 digit layouts in that order."""
    trimmed = text.strip()
    return _match_seven(trimmed) or _match_ten(trimmed) or _match_eleven(trimmed)


def _digits(patterns: Sequence[re.Pattern[str]], value: str) -> Optional[str]:
    for pattern in patterns:
        match = pattern.fullmatch(value)
        if match:
            return "".join(match.groups())
    return None


def _match_seven(value: str) -> Optional[PhoneMatch]:
    digits = _digits(_SEVEN_DIGIT_PATTERNS, value)
    if digits is None:
        return None
    return PhoneMatch(
        kind=DetectionKind.PHONE_7,
        raw_number=value,
        formatted_display=f"{digits[:3]}-{digits[3:]}",
        tel_url=digits,
    )


def _match_ten(value: str) -> Optional[PhoneMatch]:
    digits = _digits(_TEN_DIGIT_PATTERNS, value)
    if digits is None:
        return None
    return PhoneMatch(
        kind=DetectionKind.PHONE_10,
        raw_number=value,
        formatted_display=_group_ten(digits),
        tel_url=digits,
    )


def _match_eleven(value: str) -> Optional[PhoneMatch]:
    digits = _digits(_US_PATTERNS, value)
    if digits is not None:
        return PhoneMatch(
            kind=DetectionKind.PHONE_11,
            raw_number=value,
            formatted_display=f"1-{_group_ten(digits[1:])}",
            tel_url=f"+1{digits[1:]}",
        )

    # Any other country code needs an explicit leading "+".
    digits = _digits(_INTERNATIONAL_PATTERNS, value)
    if digits is not None:
        return PhoneMatch(
            kind=DetectionKind.PHONE_11,
            raw_number=value,
            formatted_display=f"+{digits[0]}-{_group_ten(digits[1:])}",
            tel_url=f"+{digits}",
        )
    return None


def _group_ten(digits: str) -> str:
    return f"{digits[:3]}-{digits[3:6]}-{digits[6:]}"


__all__ = ["PhoneMatch", "detect_phone", "match_phone_number"]
