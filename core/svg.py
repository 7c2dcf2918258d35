"""Vector-graphics object model: nodes with style, transform, definitions and children."""
from dataclasses import dataclass, field

from .types import Fill, Stroke, Transform

# ============================================================
# Error Type
# ============================================================
class SvgError(ValueError):
    """Raised for malformed object-model requests."""

# ============================================================
# Object Node
# ============================================================
@dataclass
class SvgObject:
    """One drawable node.

    ``definitions`` holds nodes referenced by this one (masks, templates);
    ``objects`` holds ordered children. ``lines`` carries text content.
    """
    tag: str = ""
    id: str = ""
    fill: Fill = Fill()
    stroke: Stroke = Stroke()
    transform: Transform = Transform()
    attribute_map: dict[str, str] = field(default_factory=dict)
    definitions: list["SvgObject"] = field(default_factory=list)
    objects: list["SvgObject"] = field(default_factory=list)
    lines: list[str] = field(default_factory=list)

    def add_object(self, o: "SvgObject") -> None:
        self.objects.append(o)

    def is_defined(self) -> bool:
        return bool(self.tag)

def id_to_url(id_: str) -> str:
    """Reference string for a node id, e.g. 'url(#disc_mask)'."""
    return f"url(#{id_})"
