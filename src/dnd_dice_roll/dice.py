from __future__ import annotations

import logging
import random
import secrets
import uuid
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any, Protocol

from .errors import DiceError, ParseError
from .models import DieSpec, RollGroup, RollMode, RollReport, RollResult
from .parser import parse_tokens


log = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Uniform integers in the closed range ``[a, b]``.

    ``random.Random`` and ``secrets.SystemRandom`` both qualify.
    """

    def randint(self, a: int, b: int) -> int: ...


def default_rng(seed: int | None = None) -> RandomSource:
    if seed is None:
        return secrets.SystemRandom()
    return random.Random(seed)


def _now_utc_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def _roll_one(spec: DieSpec, rng: RandomSource) -> RollResult:
    r1 = rng.randint(1, spec.sides)
    modifier = spec.modifier or 0

    if spec.mode is RollMode.NORMAL:
        return RollResult(label=spec.label, kept_value=r1, modifier_applied=modifier)

    r2 = rng.randint(1, spec.sides)
    if spec.mode is RollMode.ADVANTAGE:
        kept, discarded = max(r1, r2), min(r1, r2)
    else:
        kept, discarded = min(r1, r2), max(r1, r2)
    return RollResult(
        label=spec.label,
        kept_value=kept,
        discarded_value=discarded,
        modifier_applied=modifier,
    )


def resolve(spec: DieSpec, rng: RandomSource) -> list[RollResult]:
    """Roll every logical die of ``spec``, one result per die, in order."""
    return [_roll_one(spec, rng) for _ in range(spec.count)]


def roll_tokens(tokens: Sequence[str], rng: RandomSource) -> RollReport:
    """Parse all tokens, then roll them in input order.

    Parsing happens up front so a bad token aborts the run before any draw.
    """
    try:
        specs = parse_tokens(tokens)
    except ParseError as e:
        log.debug("dice.parse.failed", extra={"token": e.token, "kind": e.kind.value})
        raise

    groups: list[RollGroup] = []
    for tok, spec in zip(tokens, specs):
        group = RollGroup(token=tok, spec=spec, results=tuple(resolve(spec, rng)))
        log.debug(
            "dice.roll.resolved",
            extra={"token": tok, "kept": [r.kept_value for r in group.results], "subtotal": group.subtotal},
        )
        groups.append(group)

    return RollReport(groups=tuple(groups))


def _explain(group: RollGroup) -> str:
    rolls = ", ".join(r.display for r in group.results)
    text = f"{group.token}: [{rolls}]"
    if group.spec.modifier is not None:
        text += f" {group.modifier:+d}"
    return f"{text} => {group.subtotal}"


def roll_from_args(tokens: Sequence[str], rng: RandomSource | None = None) -> dict[str, Any]:
    """Parse, validate, then roll. Raises DiceError for invalid input."""

    source = rng if rng is not None else default_rng()
    report = roll_tokens(tokens, source)

    groups: list[dict[str, Any]] = []
    for group in report.groups:
        groups.append(
            {
                "token": group.token,
                "count": group.spec.count,
                "sides": group.spec.sides,
                "mode": group.spec.mode.value,
                "rolls": [
                    {
                        "label": r.label,
                        "kept": r.kept_value,
                        "discarded": r.discarded_value,
                    }
                    for r in group.results
                ],
                "modifier": group.modifier,
                "subtotal": group.subtotal,
            }
        )

    explanation = ("; ".join(_explain(g) for g in report.groups) + f" => {report.total}").lstrip()

    return {
        "request_id": uuid.uuid4().hex,
        "timestamp": _now_utc_iso(),
        "input": list(tokens),
        "rng": {
            "source": type(source).__name__,
            "nonce": str(uuid.uuid4()),
        },
        "groups": groups,
        "total": report.total,
        "explanation": explanation,
    }
