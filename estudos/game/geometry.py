"""Points and axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vector:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def max_x(self) -> float:
        return self.x + self.width

    def max_y(self) -> float:
        return self.y + self.height

    def intersects(self, other: "Rect") -> bool:
        """Whether the rectangles overlap; touching edges count."""
        return (self.x <= other.max_x() and other.x <= self.max_x()
                and self.y <= other.max_y() and other.y <= self.max_y())