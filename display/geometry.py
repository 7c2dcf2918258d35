"""Surface and eta-line renderers.

`surface` turns a Surface descriptor into one SvgObject, realising rings and
boolean subtraction as mask definitions built by recursive calls. `eta_lines`
draws pseudorapidity lines in a z-r view.
"""
import logging
import math
from typing import NamedTuple, Sequence

from core.types import Fill, Stroke, Font, Transform
from core.svg import SvgObject, id_to_url
from core.geometry import (
    sector_contour, is_full_opening, theta_from_eta, eta_line_end, to_string,
)
from core import draw
from proto.surface import Surface, View
from display.constants import (
    MASK_VISIBLE, MASK_HIDDEN,
    MASK_SUFFIX, MASK_OUTER_SUFFIX, MASK_INNER_SUFFIX,
    ETA_LINE_INFIX, ETA_LABEL_INFIX, LABEL_OFFSET_FACTOR,
)

logger = logging.getLogger(__name__)

# ============================================================
# Mask Helpers
# ============================================================
def _as_mask_member(o: SvgObject, color: str) -> SvgObject:
    """Strip own style so the mask colour in the attribute map decides."""
    o.fill = Fill(sterile=True)
    o.stroke = Stroke(sterile=True)
    o.attribute_map["fill"] = color
    return o

def _attach_mask(s: SvgObject, mask_id: str, outer: SvgObject, inner: SvgObject,
                 stroke: Stroke) -> None:
    """Wrap outer (visible) and inner (hidden) in a mask and point s at it."""
    mask = SvgObject(tag="mask", id=mask_id, fill=Fill(sterile=True), stroke=stroke)
    mask.add_object(outer)
    mask.add_object(inner)
    # at most one mask per node: a later mask supersedes an earlier one
    s.definitions = [d for d in s.definitions if d.id != mask_id]
    s.definitions.append(mask)
    s.attribute_map["mask"] = id_to_url(mask_id)

# ============================================================
# Surface Renderer
# ============================================================
def surface(id_: str, s: Surface, view: View, draw_boolean: bool = True,
            force_identity_transform: bool = False, apply_scale: bool = False,
            as_template: bool = False) -> SvgObject:
    """Render a surface descriptor through view.

    A defined template_object (one with a tag) short-circuits everything else: it is
    instantiated with the descriptor's style, without translation and
    rotation if as_template, and with unit scale unless apply_scale.

    Otherwise discs become a sector polygon or a full circle (ring holes
    masked out), other kinds a polygon of view-projected vertices. With
    draw_boolean, a single subtraction partner is masked out last.
    """
    if s.template_object is not None and s.template_object.is_defined():
        draw_transform = s.transform
        if as_template:
            draw_transform = draw_transform._replace(tr=(0.0, 0.0), rot=(0.0, 0.0, 0.0))
        if not apply_scale:
            draw_transform = draw_transform._replace(scale=(1.0, 1.0))
        logger.debug("surface %s: instantiating template %s", id_, s.template_object.id)
        return draw.from_template(id_, s.template_object, s.fill, s.stroke, draw_transform)

    draw_transform = Transform() if force_identity_transform else s.transform
    draw_transform = draw_transform._replace(scale=s.transform.scale)

    if s.type == "disc":
        r_in, r_out = s.radii
        if not is_full_opening(s.opening):
            contour = sector_contour(r_in, r_out, s.opening[0], s.opening[1])
            o = draw.polygon(id_, contour, s.fill, s.stroke, draw_transform)
        else:
            o = draw.circle(id_, (0.0, 0.0), r_out, s.fill, s.stroke, draw_transform)
            if r_in:
                logger.debug("surface %s: ring mask r_in=%s r_out=%s", id_, r_in, r_out)
                outer = surface(id_ + MASK_OUTER_SUFFIX, s._replace(radii=(0.0, r_out)),
                                view, False)
                inner = surface(id_ + MASK_INNER_SUFFIX, s._replace(radii=(0.0, r_in)),
                                view, False)
                _attach_mask(o, id_ + MASK_SUFFIX,
                             _as_mask_member(outer, MASK_VISIBLE),
                             _as_mask_member(inner, MASK_HIDDEN),
                             Stroke(sterile=True))
    else:
        o = draw.polygon(id_, view(s.vertices), s.fill, s.stroke, draw_transform)

    if (draw_boolean and len(s.boolean_surface) == 1
            and s.boolean_operation == "subtraction"):
        logger.debug("surface %s: boolean subtraction mask", id_)
        outer = surface(id_ + MASK_OUTER_SUFFIX, s, view, False)
        inner = surface(id_ + MASK_INNER_SUFFIX, s.boolean_surface[0], view)
        # the mask keeps the surface's own stroke, unlike the ring mask
        _attach_mask(o, id_ + MASK_SUFFIX,
                     _as_mask_member(outer, MASK_VISIBLE),
                     _as_mask_member(inner, MASK_HIDDEN),
                     s.stroke)
    return o

# ============================================================
# Eta Lines
# ============================================================
class EtaLineGroup(NamedTuple):
    values: Sequence[float]
    stroke: Stroke = Stroke()
    label: bool = False
    font: Font = Font()

def eta_lines(id_: str, zr: float, rr: float, groups: Sequence[EtaLineGroup],
              transform: Transform = Transform()) -> SvgObject:
    """Lines of constant pseudorapidity from the origin to the z-r box edge.

    zr, rr: half length and radius of the detector box.
    groups: (values, stroke, label, font) tuples; labelled groups get the
    value as text just beyond each line end.
    Child ids are '<id>_eta_line_<group>_<index>' and '<id>_eta_label_<group>_<index>'.
    """
    e = SvgObject(tag="g", id=id_, transform=transform)
    for ig, (values, stroke, label, font) in enumerate(groups):
        for ie, eta in enumerate(values):
            theta = theta_from_eta(eta)
            end = eta_line_end(theta, zr, rr)
            uid = f"{ig}_{ie}"
            e.add_object(draw.line(id_ + ETA_LINE_INFIX + uid, (0.0, 0.0), end, stroke))
            if label:
                off = LABEL_OFFSET_FACTOR * font.size
                lx = end[0] + math.cos(theta) * off
                ly = end[1] + math.sin(theta) * off
                if eta == 0.0:
                    # centre the "0" label, which would otherwise sit on the line
                    lx -= off
                e.add_object(draw.text(id_ + ETA_LABEL_INFIX + uid, (lx, ly),
                                       [to_string(eta)], font))
    logger.debug("eta_lines %s: %d objects", id_, len(e.objects))
    return e
