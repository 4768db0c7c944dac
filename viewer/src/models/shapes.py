"""Shape data structures produced by the light table.

Every finished gesture is reported as one of these value types. They are
plain dataclasses so the gesture logic can be exercised without a running
Qt application; conversion to QPainterPath lives in utils.geometry.
"""
import math
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class Vec2:
    """2D point in light table pixel coordinates (Y-down)."""
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def distance(self, other: 'Vec2') -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class LineShape:
    """Straight segment p1 -> p2.

    Also used as a movement summary (press point -> release point) for the
    path and image modes, and as a zero-length line for point picks.
    """
    p1: Vec2
    p2: Vec2

    @property
    def is_degenerate(self) -> bool:
        return self.p1 == self.p2

    @property
    def length(self) -> float:
        return self.p1.distance(self.p2)


@dataclass(frozen=True)
class RectShape:
    """Axis-aligned rectangle with non-negative width and height."""
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_corners(cls, p1: Vec2, p2: Vec2) -> 'RectShape':
        return cls(
            min(p1.x, p2.x),
            min(p1.y, p2.y),
            abs(p1.x - p2.x),
            abs(p1.y - p2.y),
        )

    @property
    def center(self) -> Vec2:
        return Vec2(self.x + self.width / 2.0, self.y + self.height / 2.0)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def corners(self) -> Tuple[Vec2, Vec2, Vec2, Vec2]:
        """Return (top-left, top-right, bottom-left, bottom-right)."""
        right = self.x + self.width
        bottom = self.y + self.height
        return (
            Vec2(self.x, self.y),
            Vec2(right, self.y),
            Vec2(self.x, bottom),
            Vec2(right, bottom),
        )


@dataclass(frozen=True)
class CircleShape:
    """Circle given by center and radius."""
    center: Vec2
    radius: float

    def bounding_rect(self) -> RectShape:
        return RectShape(
            self.center.x - self.radius,
            self.center.y - self.radius,
            self.radius * 2,
            self.radius * 2,
        )


@dataclass(frozen=True)
class PolylineShape:
    """Open multi-segment path through the given vertices."""
    points: Tuple[Vec2, ...]

    @property
    def vertex_count(self) -> int:
        return len(self.points)

    @property
    def last_point(self) -> Vec2:
        return self.points[-1]

    def segments(self) -> List[LineShape]:
        return [LineShape(a, b) for a, b in zip(self.points, self.points[1:])]


@dataclass(frozen=True)
class CrosshairShape:
    """Point-pick feedback glyph: four strokes around a center.

    The strokes stop short of the center, leaving a gap of radius/2 so the
    picked pixel itself stays visible.
    """
    center: Vec2
    radius: float
    strokes: Tuple[LineShape, ...] = field(default=())

    @classmethod
    def around(cls, center: Vec2, radius: float) -> 'CrosshairShape':
        gap = radius / 2
        cx, cy = center
        strokes = (
            LineShape(Vec2(cx - radius, cy), Vec2(cx - gap, cy)),
            LineShape(Vec2(cx + gap, cy), Vec2(cx + radius, cy)),
            LineShape(Vec2(cx, cy - radius), Vec2(cx, cy - gap)),
            LineShape(Vec2(cx, cy + gap), Vec2(cx, cy + radius)),
        )
        return cls(center, radius, strokes)
