"""Intersection value types: status, located points, and results."""
from enum import Enum
from typing import NamedTuple
from geom.types import Point


class IntersectionStatus(Enum):
    INTERSECTION = "intersection"
    NO_INTERSECTION = "no intersection"
    NO_INTERSECTION_INSIDE = "inside"
    NO_INTERSECTION_OUTSIDE = "outside"
    NO_INTERSECTION_COINCIDENT = "coincident"
    NO_INTERSECTION_PARALLEL = "parallel"
    NO_INTERSECTION_TANGENT = "tangent"


class BasicIntersectionPoint(NamedTuple):
    """Location plus the parameter on curve A."""
    point: Point
    parameter_a: float


class BasicIntersectionResult(NamedTuple):
    status: IntersectionStatus
    points: tuple[BasicIntersectionPoint, ...] = ()


class IntersectionPoint(NamedTuple):
    """One located intersection with per-curve parameter, tangent, and segment index."""
    point: Point
    parameter_a: float = 0.0
    tangent_a: Point = (0.0, 0.0)
    segment_a: int = 0
    parameter_b: float = 0.0
    tangent_b: Point = (0.0, 0.0)
    segment_b: int = 0

    @property
    def x(self) -> float:
        return self.point[0]

    @property
    def y(self) -> float:
        return self.point[1]

    def with_segment_a(self, i: int) -> "IntersectionPoint":
        return self._replace(segment_a=i)

    def with_segment_b(self, i: int) -> "IntersectionPoint":
        return self._replace(segment_b=i)

    def swapped(self) -> "IntersectionPoint":
        """Same location with the A and B attributes exchanged."""
        return IntersectionPoint(self.point, self.parameter_b, self.tangent_b, self.segment_b,
                                 self.parameter_a, self.tangent_a, self.segment_a)

    def basic(self) -> BasicIntersectionPoint:
        return BasicIntersectionPoint(self.point, self.parameter_a)


class IntersectionResult(NamedTuple):
    """Status plus points in discovery order."""
    status: IntersectionStatus
    points: tuple[IntersectionPoint, ...] = ()

    @classmethod
    def of(cls, points) -> "IntersectionResult":
        """INTERSECTION if any points were found, else NO_INTERSECTION."""
        points = tuple(points)
        status = IntersectionStatus.INTERSECTION if points else IntersectionStatus.NO_INTERSECTION
        return cls(status, points)

    @property
    def is_intersection(self) -> bool:
        return self.status is IntersectionStatus.INTERSECTION

    @property
    def parameters_a(self) -> list[float]:
        return [p.parameter_a for p in self.points]

    @property
    def parameters_b(self) -> list[float]:
        return [p.parameter_b for p in self.points]

    def swapped(self) -> "IntersectionResult":
        return IntersectionResult(self.status, tuple(p.swapped() for p in self.points))

    def basic(self) -> BasicIntersectionResult:
        return BasicIntersectionResult(self.status, tuple(p.basic() for p in self.points))
