"""Order layers by the hue of their background color"""

import logging
from typing import List

from services.background import layer_hue

logger = logging.getLogger(__name__)


def sort_layers_by_hue(layers: List) -> List:
    """Sort layers in place by ascending background hue

    list.sort is stable, so layers with equal hue keep their relative
    order. Layers without a resolvable background sort as hue 0.

    Args:
        layers: Mutable list of layer handles

    Returns:
        The same list, sorted
    """
    layers.sort(key=layer_hue)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Sorted hues: " + ", ".join(f"{layer_hue(l):.1f}" for l in layers))
    return layers
