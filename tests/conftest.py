"""Shared test fixtures for spinner schematic tests."""
import pytest
from shared.geometry import path_vertices
from spinner.layout import compute_schematic_layout
from spinner.gen_schematic import build_schematic_data, render_schematic_svg


@pytest.fixture(scope="session")
def layout3():
    """Default three-branch layout: 30mm internal radius, 18mm bearings."""
    return compute_schematic_layout(3, 30, 18)


@pytest.fixture(scope="session")
def outline3_verts(layout3):
    """Vertex list of the default outline."""
    return path_vertices(layout3.outline)


@pytest.fixture(scope="session")
def schematic_data():
    """build_schematic_data result for the default parameters."""
    return build_schematic_data()


@pytest.fixture(scope="session")
def schematic_svg(schematic_data):
    """Rendered SVG string for the default parameters."""
    return render_schematic_svg(schematic_data)
