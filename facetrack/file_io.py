"""Detection log files (JSONL, one cycle per line)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from facetrack.geometry import Rect


class DetectionLogError(RuntimeError):
    """Raised when a detection log cannot be parsed."""


@dataclass
class DetectionCycle:
    """Detections reported for one frame."""
    t: float
    rects: List[Rect] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"t": self.t, "rects": [r.to_list() for r in self.rects]}


def load_detection_log(path: Path) -> list[DetectionCycle]:
    """Load a JSONL detection log: ``{"t": 1200, "rects": [[x, y, w, h], ...]}`` per line."""
    path = Path(path)
    if not path.exists():
        raise DetectionLogError(f"Detection log not found: {path}")

    cycles: list[DetectionCycle] = []
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                raw = json.loads(line)
                cycle = DetectionCycle(
                    t=float(raw["t"]),
                    rects=[Rect.from_list(r) for r in raw.get("rects", [])],
                )
            except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as exc:
                raise DetectionLogError(f"{path}:{line_no}: malformed detection cycle ({exc})") from exc
            cycles.append(cycle)
    return cycles


def save_detection_log(cycles: list[DetectionCycle], path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for cycle in cycles:
            f.write(json.dumps(cycle.to_dict()) + "\n")
