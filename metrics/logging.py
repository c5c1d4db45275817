# metrics/logging.py
from __future__ import annotations
import csv, logging, os
from typing import Dict, Any

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "battlesnake"

RESULT_KEYS = [
    "game",
    "turns", "winner", "our_place", "our_cause",
    "turns_ema", "win_rate100",
    "elim/wall", "elim/self", "elim/body", "elim/head", "elim/starvation",
]

def configure_logging(level: str | int = "INFO") -> None:
    """One stream handler on the root logger; idempotent."""
    root = logging.getLogger()
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter(LOG_FORMAT))
        h.set_name(HANDLER_NAME)
        root.addHandler(h)
    root.setLevel(level)

class CSVLogger:
    """Append-only CSV of per-game results, header written once per file."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, game: int, scalars: Dict[str, Any]) -> None:
        row = {"game": game, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(row.keys())
            self._writer = csv.DictWriter(self._file, fieldnames=self._fieldnames, extrasaction="ignore")
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(row)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()
