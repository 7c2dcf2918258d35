"""Surface descriptor: shape kind, radii, opening, vertices, style and boolean partner."""
import math
from typing import Callable, Literal, NamedTuple, Optional, Sequence

from core.types import Point, Fill, Stroke, Transform
from core.svg import SvgObject

SurfaceType = Literal["polygon", "disc"]
BooleanOperation = Literal["none", "subtraction"]

# Maps raw (2D or 3D) vertices into the drawing plane.
View = Callable[[Sequence[Sequence[float]]], list[Point]]

class Surface(NamedTuple):
    """Read-only description of one surface; derive variants with _replace()."""
    type: SurfaceType = "polygon"
    radii: tuple[float, float] = (0.0, 0.0)    # (inner, outer); inner 0 means no ring
    opening: tuple[float, float] = (-math.pi, math.pi)
    vertices: tuple[Sequence[float], ...] = ()
    transform: Transform = Transform()
    fill: Fill = Fill()
    stroke: Stroke = Stroke()
    boolean_surface: tuple["Surface", ...] = ()
    boolean_operation: BooleanOperation = "none"
    template_object: Optional[SvgObject] = None
