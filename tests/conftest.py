#
# conftest.py: shared fixtures for tracepaint tests
#

from pathlib import Path

import numpy as np
import pytest

from tracepaint_zone import Rect, Circle, Polygon, ShapeCatalog, TargetShape


REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def square():
    """Rect {0, 0, 100, 100}."""
    return Rect(x=0, y=0, width=100, height=100)


@pytest.fixture
def origin_circle():
    """Circle of radius 10 at the origin."""
    return Circle(cx=0, cy=0, r=10)


@pytest.fixture
def l_shape():
    """Non-convex L: 100x100 square with the bottom-right 60x60 notch removed."""
    return Polygon(points=[(0, 0), (100, 0), (100, 40), (40, 40), (40, 100), (0, 100)])


@pytest.fixture
def catalog_records():
    return [
        {"id": "square", "name": "Square", "type": "rect", "x": 0, "y": 0, "width": 100, "height": 100},
        {"id": "circle", "name": "Circle", "type": "circle", "cx": 350, "cy": 250, "r": 150},
        {"id": "triangle", "name": "Triangle", "type": "polygon", "points": [[350, 80], [560, 420], [140, 420]]},
    ]


@pytest.fixture
def catalog(catalog_records):
    return ShapeCatalog.from_list(catalog_records)


@pytest.fixture
def reference_square():
    """Square target authored for the 700x500 reference canvas."""
    return TargetShape(shape_id="square", name="Square", shape=Rect(x=250, y=100, width=200, height=200))


@pytest.fixture
def rgba_buffer():
    """Factory for HxWx4 RGBA buffers, fully transparent or fully painted."""

    def make(width, height, painted=False):
        pixels = np.zeros((height, width, 4), dtype=np.uint8)
        if painted:
            pixels[:, :] = (0, 0, 255, 255)
        return pixels

    return make
