"""Shared test fixtures: views, styles, and surface descriptors."""
import pytest
from core.types import Color, Fill, Stroke, Font, Transform
from core.svg import SvgObject
from proto.surface import Surface


@pytest.fixture(scope="session")
def xy_view():
    """Drops z from 3D vertices."""
    return lambda vertices: [(v[0], v[1]) for v in vertices]


@pytest.fixture(scope="session")
def red_fill():
    return Fill(Color((200, 0, 0), 0.5))


@pytest.fixture(scope="session")
def blue_stroke():
    return Stroke(Color((0, 0, 200)), 2.0)


@pytest.fixture(scope="session")
def label_font():
    return Font(size=10.0)


@pytest.fixture(scope="session")
def shifted():
    """Transform with translation, rotation and scale all set."""
    return Transform(tr=(10.0, 20.0), rot=(30.0, 0.0, 0.0), scale=(2.0, 3.0))


@pytest.fixture(scope="session")
def full_disc(red_fill, blue_stroke):
    """Full circle, outer radius 100, no ring."""
    return Surface(type="disc", radii=(0.0, 100.0), fill=red_fill, stroke=blue_stroke)


@pytest.fixture(scope="session")
def ring_disc(full_disc):
    """Full circle with inner radius 40."""
    return full_disc._replace(radii=(40.0, 100.0))


@pytest.fixture(scope="session")
def sector_disc(ring_disc):
    return ring_disc._replace(opening=(-0.5, 0.5))


@pytest.fixture(scope="session")
def square(red_fill, blue_stroke):
    """20x20 polygon surface centred on the origin, 3D vertices."""
    return Surface(
        type="polygon",
        vertices=((-10.0, -10.0, 5.0), (10.0, -10.0, 5.0),
                  (10.0, 10.0, 5.0), (-10.0, 10.0, 5.0)),
        fill=red_fill, stroke=blue_stroke,
    )


@pytest.fixture(scope="session")
def square_minus_triangle(square, red_fill):
    hole = Surface(type="polygon", fill=red_fill,
                   vertices=((-2.0, -2.0, 0.0), (2.0, -2.0, 0.0), (0.0, 2.0, 0.0)))
    return square._replace(boolean_surface=(hole,), boolean_operation="subtraction")


@pytest.fixture(scope="session")
def module_template():
    t = SvgObject(tag="polygon", id="module_template")
    t.attribute_map["points"] = "0,0 1,0 1,1"
    return t
