"""Pure geometry functions for sectors, openings and eta lines, plus label formatting."""
import math

from .types import Point
from .constants import OPENING_TOLERANCE, ARC_SEGMENTS, LABEL_PRECISION

# ============================================================
# Arc and Sector Contours
# ============================================================
def arc_poly(cx: float, cy: float, r: float, sa: float, ea: float, n: int = 60) -> list[Point]:
    """Generate n+1 points along a circular arc from angle sa to ea (radians)."""
    return [(cx+r*math.cos(sa+(ea-sa)*i/n), cy+r*math.sin(sa+(ea-sa)*i/n))
            for i in range(n+1)]

def sector_contour(r_in: float, r_out: float, phi_min: float, phi_max: float,
                   n: int = ARC_SEGMENTS) -> list[Point]:
    """Closed boundary of the annular sector between two radii and two angles.

    Outer arc runs phi_min -> phi_max, inner arc back phi_max -> phi_min.
    With r_in == 0 the inner arc collapses to the origin.
    """
    contour = arc_poly(0.0, 0.0, r_out, phi_min, phi_max, n)
    if r_in:
        contour.extend(arc_poly(0.0, 0.0, r_in, phi_max, phi_min, n))
    else:
        contour.append((0.0, 0.0))
    return contour

def is_full_opening(opening: tuple[float, float], tol: float = OPENING_TOLERANCE) -> bool:
    """True if the angular opening covers [-pi, pi] within tol."""
    return abs(opening[0] + math.pi) <= tol and abs(opening[1] - math.pi) <= tol

# ============================================================
# Pseudorapidity
# ============================================================
def theta_from_eta(eta: float) -> float:
    """Polar angle for a pseudorapidity value: 2 atan(exp(-eta))."""
    return 2.0 * math.atan(math.exp(-eta))

def eta_line_end(theta: float, z: float, r: float) -> Point:
    """Point where a ray at polar angle theta leaves the |z| <= z, r' <= r box.

    Rays below the corner angle atan2(r, z) exit through the z face,
    all others through the r face.
    """
    theta_cut = math.atan2(r, z)
    if theta < theta_cut:
        return (z, z * math.tan(theta))
    return (r / math.tan(theta), r)

# ============================================================
# Formatting Helpers
# ============================================================
def to_string(v: float, precision: int = LABEL_PRECISION) -> str:
    """Fixed-point string with trailing zeros removed, e.g. 1.50 -> '1.5', 0.0 -> '0'."""
    s = f"{v:.{precision}f}"
    if "." in s:
        s = s.rstrip('0').rstrip('.')
    return "0" if s == "-0" else s
