"""Primitive constructors: each returns a fresh SvgObject with its geometry in attribute_map."""
from .types import Point, Fill, Stroke, Font, Marker, Transform
from .svg import SvgObject, SvgError, id_to_url
from .geometry import to_string

def _points_attr(points: list[Point]) -> str:
    return " ".join(f"{to_string(x)},{to_string(y)}" for x, y in points)

def circle(id_: str, p: Point, r: float, fill: Fill = Fill(), stroke: Stroke = Stroke(),
           transform: Transform = Transform()) -> SvgObject:
    c = SvgObject(tag="circle", id=id_, fill=fill, stroke=stroke, transform=transform)
    c.attribute_map.update(cx=to_string(p[0]), cy=to_string(p[1]), r=to_string(r))
    return c

def polygon(id_: str, points: list[Point], fill: Fill = Fill(), stroke: Stroke = Stroke(),
            transform: Transform = Transform()) -> SvgObject:
    """Filled polygon; the vertex count is not checked."""
    p = SvgObject(tag="polygon", id=id_, fill=fill, stroke=stroke, transform=transform)
    p.attribute_map["points"] = _points_attr(points)
    return p

def line(id_: str, start: Point, end: Point, stroke: Stroke = Stroke(),
         transform: Transform = Transform()) -> SvgObject:
    ln = SvgObject(tag="line", id=id_, stroke=stroke, transform=transform)
    ln.attribute_map.update(x1=to_string(start[0]), y1=to_string(start[1]),
                            x2=to_string(end[0]), y2=to_string(end[1]))
    return ln

def text(id_: str, p: Point, lines: list[str], font: Font = Font(),
         transform: Transform = Transform()) -> SvgObject:
    t = SvgObject(tag="text", id=id_, fill=Fill(font.color), transform=transform,
                  lines=list(lines))
    t.attribute_map.update({"x": to_string(p[0]), "y": to_string(p[1]),
                            "font-family": font.family, "font-size": to_string(font.size)})
    if font.style:
        t.attribute_map["font-style"] = font.style
    return t

def from_template(id_: str, ref: SvgObject, fill: Fill = Fill(), stroke: Stroke = Stroke(),
                  transform: Transform = Transform()) -> SvgObject:
    """Instance of a pre-built node; the template is shared, not copied.

    Raises SvgError if the template is not defined.
    """
    if not ref.is_defined():
        raise SvgError(f"Undefined template for {id_!r}: tag={ref.tag!r}, id={ref.id!r}")
    u = SvgObject(tag="use", id=id_, fill=fill, stroke=stroke, transform=transform)
    u.attribute_map["href"] = f"#{ref.id}"
    u.definitions.append(ref)
    return u

def measure(id_: str, start: Point, end: Point, stroke: Stroke = Stroke(),
            marker: Marker = Marker(("<",)), label: str = "", font: Font = Font()) -> SvgObject:
    """Dimension line between two points, end markers, optional midpoint label."""
    m = SvgObject(tag="g", id=id_)
    ln = line(id_ + "_line", start, end, stroke)
    if marker.types and marker.types[0]:
        for end_name in ("start", "end"):
            mk = SvgObject(tag="marker", id=f"{id_}_marker_{end_name}",
                           fill=marker.fill, stroke=marker.stroke)
            mk.attribute_map.update({"markerWidth": to_string(marker.size),
                                     "markerHeight": to_string(marker.size),
                                     "orient": "auto", "data-type": marker.types[0]})
            m.definitions.append(mk)
            ln.attribute_map[f"marker-{end_name}"] = id_to_url(mk.id)
    m.add_object(ln)
    if label:
        mid = ((start[0]+end[0])/2, (start[1]+end[1])/2 + 0.5*font.size)
        m.add_object(text(id_ + "_label", mid, [label], font))
    return m
