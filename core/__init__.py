"""Shared types, object model, primitive constructors, and geometry helpers."""

from .types import Point, Point3, Color, Fill, Stroke, Font, Marker, Transform
from .svg import SvgError, SvgObject, id_to_url
from .geometry import (
    arc_poly, sector_contour, is_full_opening,
    theta_from_eta, eta_line_end, to_string,
)
from .draw import circle, polygon, line, text, from_template, measure
from .log import setup_default_logging
