"""Deterministic random sources for simulation tests."""

from __future__ import annotations

from collections.abc import Iterable
from random import Random


class ScriptedRandom(Random):
    """Random whose ``randrange``/``randint`` return scripted values.

    When a script runs out, draws fall back to the seeded generator.
    """

    def __init__(
        self,
        *,
        randrange_values: Iterable[int] = (),
        randint_values: Iterable[int] = (),
        seed: int = 0,
    ) -> None:
        super().__init__(seed)
        self._randrange_values = list(randrange_values)
        self._randint_values = list(randint_values)
        self.randrange_calls = 0
        self.randint_calls = 0

    def randrange(self, start, stop=None, step=1):  # type: ignore[override]
        self.randrange_calls += 1
        if self._randrange_values:
            return self._randrange_values.pop(0)
        return super().randrange(start, stop, step)

    def randint(self, a, b):  # type: ignore[override]
        self.randint_calls += 1
        if self._randint_values:
            return self._randint_values.pop(0)
        return super().randrange(a, b + 1)


class ConstantRandom(Random):
    """Random whose integer draws always return the same value."""

    def __init__(self, *, randrange_value: int = 0, randint_value: int = 0) -> None:
        super().__init__(0)
        self.randrange_value = randrange_value
        self.randint_value = randint_value

    def randrange(self, start, stop=None, step=1):  # type: ignore[override]
        return self.randrange_value

    def randint(self, a, b):  # type: ignore[override]
        return self.randint_value
