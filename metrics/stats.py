# metrics/stats.py
from __future__ import annotations
from collections import Counter, deque
from typing import Deque, Dict, Optional

class EMA:
    """Exponential moving average of game length."""
    def __init__(self, alpha: float):
        self.alpha = alpha
        self.value: Optional[float] = None
    def update(self, x: float) -> float:
        self.value = x if self.value is None else (self.alpha * x + (1 - self.alpha) * self.value)
        return self.value

class WindowedRate:
    """Share of the last `window` games where something happened (e.g. our snake won)."""
    def __init__(self, window: int):
        self.window = window
        self.buf: Deque[bool] = deque(maxlen=window)
    def add(self, hit: bool) -> None:
        self.buf.append(bool(hit))
    def rate(self) -> float:
        return sum(self.buf) / len(self.buf) if self.buf else 0.0

class CauseTally:
    """Running count of elimination causes, keyed by kind ("wall", "self", "body", "head", "starvation")."""
    def __init__(self):
        self.counts: Counter[str] = Counter()
    def add(self, reason: Optional[str]) -> None:
        if reason:
            self.counts[reason.split(":", 1)[0]] += 1
    def as_scalars(self, prefix: str = "elim/") -> Dict[str, int]:
        kinds = ("wall", "self", "body", "head", "starvation")
        return {f"{prefix}{k}": self.counts.get(k, 0) for k in kinds}
