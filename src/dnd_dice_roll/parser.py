from __future__ import annotations

import re
from collections.abc import Sequence

from .errors import InvalidCount, InvalidFormat, InvalidModifier, InvalidSides, ParseError
from .models import MAX_DIGITS, MIN_SIDES, DieSpec, RollMode


# The first 'd' is always the separator; a second one can only be the mode letter.
# Every pattern is used with fullmatch, so a stray newline never slips through.
_TOKEN_RE = re.compile(r"(?P<count>[^d]*)d(?P<rest>.*)", re.ASCII | re.DOTALL)
_BODY_RE = re.compile(r"(?P<sides>\d*)(?P<mode>[a-z]?)(?P<tail>.*)", re.ASCII | re.DOTALL)
_MODIFIER_RE = re.compile(r"(?P<value>[+-]\d+)(?P<extra>.*)", re.ASCII | re.DOTALL)
_COUNT_RE = re.compile(r"\d+", re.ASCII)


def _to_int(token: str, raw: str, error: type[ParseError], what: str) -> int:
    if len(raw.lstrip("+-")) > MAX_DIGITS:
        raise error(token, f"{what} '{raw[:12]}...' has more than {MAX_DIGITS} digits")
    return int(raw)


def _parse_count(token: str, raw: str) -> int:
    if not raw:
        return 1
    if not _COUNT_RE.fullmatch(raw):
        raise InvalidCount(token, f"Dice count must be a positive integer, got '{raw}'")
    count = _to_int(token, raw, InvalidCount, "Dice count")
    if count <= 0:
        raise InvalidCount(token, f"Dice count must be a positive integer, got '{raw}'")
    return count


def _parse_sides(token: str, raw: str) -> int:
    if not raw:
        raise InvalidSides(token, "Missing number of sides after 'd'")
    sides = _to_int(token, raw, InvalidSides, "Number of sides")
    if sides < MIN_SIDES:
        raise InvalidSides(token, f"Dice need at least {MIN_SIDES} sides, got {sides}")
    return sides


def _parse_mode(token: str, letter: str) -> RollMode:
    if letter not in ("", "a", "d"):
        raise InvalidFormat(token, f"Unknown roll mode '{letter}' (use 'a' or 'd')")
    return RollMode.from_suffix(letter)


def _parse_modifier(token: str, tail: str) -> int | None:
    if not tail:
        return None
    if tail[0] not in "+-":
        raise InvalidFormat(token, f"Unexpected trailing text '{tail}'")

    m = _MODIFIER_RE.fullmatch(tail)
    if not m:
        raise InvalidModifier(token, f"Modifier '{tail}' must be a sign followed by digits")
    if m.group("extra"):
        raise InvalidFormat(token, f"Unexpected trailing text '{m.group('extra')}'")
    return _to_int(token, m.group("value"), InvalidModifier, "Modifier")


def parse_die(token: str) -> DieSpec:
    """Parse one ``[count]d<sides>[a|d][+/-modifier]`` token.

    Raises a ``ParseError`` subclass naming the failure kind; never rolls.
    """
    normalized = token.strip().lower()

    m = _TOKEN_RE.fullmatch(normalized)
    if not m:
        raise InvalidFormat(token, "Expected dice notation like NdS")

    count = _parse_count(token, m.group("count"))

    body = _BODY_RE.fullmatch(m.group("rest"))
    if not body:
        raise InvalidFormat(token, "Expected dice notation like NdS")
    sides = _parse_sides(token, body.group("sides"))
    mode = _parse_mode(token, body.group("mode"))
    modifier = _parse_modifier(token, body.group("tail"))

    return DieSpec(count=count, sides=sides, mode=mode, modifier=modifier)


def parse_tokens(tokens: Sequence[str]) -> list[DieSpec]:
    """Parse every token in order, stopping at the first bad one."""
    return [parse_die(tok) for tok in tokens]
