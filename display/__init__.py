"""Renderers building SvgObject trees from descriptors."""

from .geometry import surface, eta_lines, EtaLineGroup
