from __future__ import annotations

ALPHA_MIN = 0.05
ALPHA_MAX = 0.9


class EmaFilter:
    """First-order low-pass (exponential moving average) over speed samples.

    Larger alpha tracks the input faster but lets more GPS noise through.
    """

    def __init__(self, alpha: float = 0.25) -> None:
        self._alpha = max(ALPHA_MIN, min(ALPHA_MAX, alpha))
        self._y: float | None = None

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def value(self) -> float | None:
        return self._y

    def next(self, x: float) -> float:
        if self._y is None:
            self._y = x
        else:
            self._y = self._alpha * x + (1 - self._alpha) * self._y
        return self._y

    def reset(self) -> None:
        self._y = None
