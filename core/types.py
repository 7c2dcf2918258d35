"""Shared type definitions: points, style bundles, and the draw transform."""
import math
from typing import NamedTuple

import numpy as np

Point = tuple[float, float]
Point3 = tuple[float, float, float]

class Color(NamedTuple):
    rgb: tuple[int, int, int] = (0, 0, 0)
    opacity: float = 1.0

    def hex(self) -> str:
        """Colour as '#rrggbb'."""
        return "#{:02x}{:02x}{:02x}".format(*self.rgb)

class Fill(NamedTuple):
    """Fill style. A sterile fill emits nothing and defers to the node's attributes."""
    color: Color = Color()
    sterile: bool = False

class Stroke(NamedTuple):
    color: Color = Color()
    width: float = 1.0
    dasharray: tuple[int, ...] = ()
    sterile: bool = False

class Font(NamedTuple):
    family: str = "Arial"
    color: Color = Color()
    size: float = 12.0
    style: str = ""

class Marker(NamedTuple):
    types: tuple[str, ...] = ("",)
    size: float = 4.0
    fill: Fill = Fill()
    stroke: Stroke = Stroke()

class Transform(NamedTuple):
    """Translation, rotation (degrees about cx, cy) and nonuniform scale.

    Applied as scale, then rotation, then translation. Nodes carry the
    transform unapplied; matrix() and apply() are the contract a writer
    or caller uses to resolve it.
    """
    tr: Point = (0.0, 0.0)
    rot: Point3 = (0.0, 0.0, 0.0)
    scale: Point = (1.0, 1.0)

    def is_identity(self) -> bool:
        return (self.tr == (0.0, 0.0) and self.rot[0] == 0.0
                and self.scale == (1.0, 1.0))

    def matrix(self) -> np.ndarray:
        """3x3 homogeneous matrix for this transform."""
        sx, sy = self.scale
        s = np.diag([sx, sy, 1.0])
        a = math.radians(self.rot[0]); cx, cy = self.rot[1], self.rot[2]
        c, sn = math.cos(a), math.sin(a)
        # rotation about (cx, cy)
        r = np.array([[c, -sn, cx - c*cx + sn*cy],
                      [sn, c, cy - sn*cx - c*cy],
                      [0.0, 0.0, 1.0]])
        t = np.array([[1.0, 0.0, self.tr[0]],
                      [0.0, 1.0, self.tr[1]],
                      [0.0, 0.0, 1.0]])
        return t @ r @ s

    def apply(self, points: list[Point]) -> list[Point]:
        """Map 2D points through the transform."""
        if not points:
            return []
        h = np.column_stack([np.asarray(points, dtype=float), np.ones(len(points))])
        out = h @ self.matrix().T
        return [(float(x), float(y)) for x, y in out[:, :2]]
