"""Points in three-dimensional space and the octants they fall in."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import astuple, dataclass
from enum import IntEnum


class Region(IntEnum):
    """The eight octants, plus NONE for points on an axis plane."""

    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5
    SIXTH = 6
    SEVENTH = 7
    EIGHTH = 8
    NONE = 9


def _format(value: float) -> str:
    return format(float(value), ".6g")


@dataclass(frozen=True)
class Point3D:
    x: float
    y: float
    z: float

    def __str__(self) -> str:
        return f"P({_format(self.x)}, {_format(self.y)}, {_format(self.z)})"


_ORIGIN = Point3D(0.0, 0.0, 0.0)

_REGIONS = {
    (1, 1, 1): Region.FIRST,
    (-1, 1, 1): Region.SECOND,
    (-1, -1, 1): Region.THIRD,
    (1, -1, 1): Region.FOURTH,
    (1, 1, -1): Region.FIFTH,
    (-1, 1, -1): Region.SIXTH,
    (-1, -1, -1): Region.SEVENTH,
    (1, -1, -1): Region.EIGHTH,
}


def _sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def distance(p1: Point3D, p2: Point3D) -> float:
    return math.sqrt((p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2 + (p1.z - p2.z) ** 2)


def zero_distance(p: Point3D) -> float:
    """Distance from ``p`` to the origin."""
    return distance(p, _ORIGIN)


def compare(p1: Point3D, p2: Point3D) -> bool:
    """True when ``p1`` lies farther from the origin than ``p2``."""
    return zero_distance(p1) > zero_distance(p2)


def region(p: Point3D) -> Region:
    return _REGIONS.get((_sign(p.x), _sign(p.y), _sign(p.z)), Region.NONE)


def in_same_subregion(x1: float, x2: float) -> bool:
    return x1 * x2 > 0


def in_same_region(p1: Point3D, p2: Point3D) -> bool:
    return all(in_same_subregion(a, b) for a, b in zip(astuple(p1), astuple(p2)))


def format_region(r: Region) -> str:
    if r == Region.NONE:
        return "None, the point is not in a region!"
    return str(int(r))


def main(argv: Iterable[str] | None = None) -> int:
    """Print a demonstration of the point functions."""
    p1 = Point3D(1.0, 2.0, 3.0)
    p2 = Point3D(-1.0, 2.0, 3.0)
    p3 = Point3D(1.0, -2.0, -3.0)
    p4 = Point3D(4.0, 5.0, 6.0)
    points = (p1, p2, p3, p4)

    for p in points:
        print(p)
    for p in points:
        print(format_region(region(p)))

    print("Distance from p1 to origin: " + _format(zero_distance(p1)))
    print("Distance from p2 to origin: " + _format(zero_distance(p2)))
    print("Is p1's distance greater than p2's? " + ("Yes" if compare(p1, p2) else "No"))
    print("Are p1 and p2 in the same region? " + ("Yes" if in_same_region(p1, p2) else "No"))
    print("Are p1 and p4 in the same region? " + ("Yes" if in_same_region(p1, p4) else "No"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())