"""Descriptors consumed by the display renderers."""

from .surface import Surface, SurfaceType, BooleanOperation, View
