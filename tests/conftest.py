from __future__ import annotations


class ScriptedRandom:
    """RandomSource double that replays a fixed sequence of draws."""

    def __init__(self, values):
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if not self._values:
            raise AssertionError("ScriptedRandom ran out of values")
        return self._values.pop(0)


class ConstantRandom:
    def __init__(self, value: int | None = None):
        self.value = value

    def randint(self, a: int, b: int) -> int:
        # None means "always the top face".
        return b if self.value is None else self.value
