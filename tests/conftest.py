"""
Shared fixtures for Sort Background Colors tests.

Provides documents, swatch layers and symbol fixtures.
"""
import sys
import os
import pytest

# Ensure plugin/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'plugin', 'src'))


# ── Colors with well-known hues ─────────────────────────────────────────

RED = (1.0, 0.0, 0.0)        # 0
ORANGE = (1.0, 0.5, 0.0)     # 30
GREEN = (0.0, 1.0, 0.0)      # 120
CYAN = (0.0, 1.0, 1.0)       # 180
BLUE = (0.0, 0.0, 1.0)       # 240
MAGENTA = (1.0, 0.0, 1.0)    # 300
GREY = (0.5, 0.5, 0.5)       # 0, unsaturated


def make_swatch(rgb, name='', left=0, top=0, width=40, height=20):
    """Shape layer filled with a single color"""
    from models.color import Color
    from models.frame import Frame
    from models.layer import Layer
    return Layer.new_shape(name or f"swatch {rgb}", Frame(left, top, width, height), Color(*rgb))


@pytest.fixture
def document():
    """Fresh document with an empty current page"""
    from models.document import Document
    return Document('Palette')


@pytest.fixture
def swatch():
    """Factory for single-fill shape layers"""
    return make_swatch


@pytest.fixture
def page_swatches(document):
    """Blue, red, green swatches placed loosely on the current page"""
    layers = [
        make_swatch(BLUE, 'blue', left=100, top=200),
        make_swatch(RED, 'red', left=300, top=50),
        make_swatch(GREEN, 'green', left=20, top=400),
    ]
    for layer in layers:
        document.current_page.add_layer(layer)
    return layers


@pytest.fixture
def symbol_master():
    """Symbol master whose first shape child is cyan, behind a text label"""
    from models.color import Color
    from models.frame import Frame
    from models.layer import Layer
    label = Layer.new_text('label', Frame(0, 0, 40, 10))
    background = Layer.new_shape('bg', Frame(0, 0, 40, 20), Color(*CYAN))
    accent = Layer.new_shape('accent', Frame(0, 0, 10, 10), Color(*RED))
    return Layer.new_symbol_master('Button', Frame(0, 0, 40, 20), layers=[label, background, accent])
