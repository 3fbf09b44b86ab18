from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .dice import DiceError, roll_from_args


mcp = FastMCP("dnd-dice-roll")


@mcp.tool()
def roll_dice(dice: list[str]):
    """Roll D&D dice given as notation tokens, e.g. ["1d20a", "4d6", "1d8-2"].

    Input: dice (list of strings, each NdS with optional a/d and +/-K)
    Output: structured JSON with audit details, per-token rows + grand total

    Raises a hard error (exception) on invalid input.
    """

    try:
        return roll_from_args(dice)
    except DiceError as e:
        # Fail-fast: surface stable error codes in the message.
        raise ValueError(str(e)) from None


def run() -> None:
    # Default transport is stdio.
    mcp.run()


if __name__ == "__main__":
    run()
