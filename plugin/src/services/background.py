"""
Sort Background Colors - Background Color Service

Resolves the representative background color of a layer:
- Shapes: first fill
- Symbol masters: first fill of the first shape child
- Symbol instances: same lookup on the backing master
- Everything else: no background

All functions are read-only; they never mutate the layers they inspect.
"""

import logging
from typing import Iterable, List, Optional

from models.color import Color, HueDescriptor, hsv_of
from models.layer import LayerKind
from constants import FALLBACK_HUE

logger = logging.getLogger(__name__)


def _first_fill_color(layer) -> Optional[Color]:
    fills = layer.fills
    if not fills:
        return None
    return fills[0].color


def _first_shape_child_color(symbol) -> Optional[Color]:
    """First fill of the first direct shape child, if any"""
    for child in symbol.layers:
        if child.kind is LayerKind.SHAPE:
            return _first_fill_color(child)
    return None


def background_color_of(layer) -> Optional[Color]:
    """Get the background color of a layer

    Args:
        layer: Layer handle of any kind

    Returns:
        Color, or None when the kind is unsupported or no fill is found
    """
    kind = layer.kind
    if kind is LayerKind.SHAPE:
        return _first_fill_color(layer)
    elif kind is LayerKind.SYMBOL_INSTANCE:
        master = layer.symbol_master
        if master is None:
            return None
        return _first_shape_child_color(master)
    elif kind is LayerKind.SYMBOL_MASTER:
        return _first_shape_child_color(layer)
    else:
        # artboards, text, groups and kinds unknown to this plugin
        logger.debug(f"No background for layer kind {kind!r}")
        return None


def layers_with_background(layers: Iterable) -> List:
    """Filter layers down to those with a readable background color

    Order is preserved.
    """
    result = [layer for layer in layers if background_color_of(layer) is not None]
    logger.debug(f"{len(result)} layer(s) with background")
    return result


def layer_color(layer) -> Optional[HueDescriptor]:
    """Hue descriptor of a layer's background, None if it has none"""
    color = background_color_of(layer)
    if color is None:
        return None
    return hsv_of(color)


def layer_hue(layer) -> float:
    """Hue of a layer's background, FALLBACK_HUE if it cannot be resolved"""
    descriptor = layer_color(layer)
    if descriptor is None:
        return FALLBACK_HUE
    return descriptor.hue
