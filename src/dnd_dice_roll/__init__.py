from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .dice import RandomSource, resolve, roll_from_args, roll_tokens
from .errors import DiceError, ParseError, ParseErrorKind
from .models import DieSpec, RollMode, RollReport, RollResult
from .parser import parse_die


def _package_version() -> str:
    try:
        return version("dnd-dice-roll")
    except PackageNotFoundError:
        # Running from a source checkout, or otherwise not installed.
        return "0.0.0"


__version__ = _package_version()

__all__ = [
    "DiceError",
    "DieSpec",
    "ParseError",
    "ParseErrorKind",
    "RandomSource",
    "RollMode",
    "RollReport",
    "RollResult",
    "__version__",
    "parse_die",
    "resolve",
    "roll_from_args",
    "roll_tokens",
]
