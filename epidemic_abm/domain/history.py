"""Append-only time series of infected counts."""

from __future__ import annotations

from collections.abc import Iterator


class History:
    """Ordered infected-count samples, one per completed tick.

    Backed by a native list, so appends are amortised O(1). The only
    mutations are :meth:`append` and :meth:`reset`.
    """

    def __init__(self, seed: int = 0) -> None:
        self._samples: list[int] = [seed]

    def append(self, infected: int) -> None:
        self._samples.append(infected)

    def reset(self, seed: int = 0) -> None:
        """Drop every sample and start again from a single seed sample."""
        self._samples = [seed]

    @property
    def samples(self) -> tuple[int, ...]:
        return tuple(self._samples)

    @property
    def latest(self) -> int:
        return self._samples[-1]

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[int]:
        return iter(self._samples)

    def __getitem__(self, index: int) -> int:
        return self._samples[index]

    def __repr__(self) -> str:
        return f"History(len={len(self._samples)}, latest={self._samples[-1]})"
