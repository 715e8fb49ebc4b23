"""
Sort Background Colors - Services

Background color lookup, hue ordering, grid layout and the command that
ties them together.
"""

from .background import background_color_of, layers_with_background, layer_color, layer_hue
from .hue_sort import sort_layers_by_hue
from .layout import layout_layers
from .sort_command import SortByHueCommand, SortState, sort_by_hue

__all__ = [
    'background_color_of',
    'layers_with_background',
    'layer_color',
    'layer_hue',
    'sort_layers_by_hue',
    'layout_layers',
    'SortByHueCommand',
    'SortState',
    'sort_by_hue',
]
