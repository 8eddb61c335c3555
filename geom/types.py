"""Shared type definitions: points and path segments."""
from typing import NamedTuple

Point = tuple[float, float]

class MoveTo(NamedTuple):
    p: Point

class LineTo(NamedTuple):
    p: Point

class QuadTo(NamedTuple):
    p1: Point; p2: Point

class CubicTo(NamedTuple):
    p1: Point; p2: Point; p3: Point

class ClosePath(NamedTuple):
    pass

PathSegment = MoveTo | LineTo | QuadTo | CubicTo | ClosePath
