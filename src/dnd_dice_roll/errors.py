"""Dice error hierarchy.

Every parse failure is a ``ParseError`` subclass tagged with a ``ParseErrorKind``
so callers can branch on the kind while the message keeps the offending token.
"""

from __future__ import annotations

from enum import Enum


class DiceError(ValueError):
    """User-facing validation errors (fail-fast, no roll performed)."""


class ParseErrorKind(str, Enum):
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_COUNT = "INVALID_COUNT"
    INVALID_SIDES = "INVALID_SIDES"
    INVALID_MODIFIER = "INVALID_MODIFIER"


class ParseError(DiceError):
    kind: ParseErrorKind = ParseErrorKind.INVALID_FORMAT

    def __init__(self, token: str, detail: str, example: str = "1d20a, 4d6 or 1d8-2") -> None:
        self.token = token
        self.detail = detail
        super().__init__(f"[{self.kind.value}] {detail} in '{token}'. Example: {example}.")


class InvalidFormat(ParseError):
    kind = ParseErrorKind.INVALID_FORMAT


class InvalidCount(ParseError):
    kind = ParseErrorKind.INVALID_COUNT


class InvalidSides(ParseError):
    kind = ParseErrorKind.INVALID_SIDES


class InvalidModifier(ParseError):
    kind = ParseErrorKind.INVALID_MODIFIER
