"""
Sort Background Colors - Grid Layout Service

Packs layers into rows inside a container, left to right and top to
bottom, then sizes the container to the content height. Earlier rows are
never reflowed.

Row height bookkeeping assumes layers of uniform height: the container
height grows by each wrapping layer's own height, so taller layers in the
middle of a row are not accounted for.
"""

import logging
from typing import Sequence

from utils.config import LayoutSettings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


def layout_layers(container, layers: Sequence, settings: LayoutSettings = DEFAULT_SETTINGS) -> float:
    """Arrange layers in rows inside the container

    A layer starts a new row when placing it after the previous one would
    pass the container width minus the right padding. A layer wider than
    that always wraps and may still overflow the container.

    Args:
        container: Layer whose width bounds the rows; its height is replaced
        layers: Layers in display order
        settings: Layout metrics

    Returns:
        The new container height (current height if layers is empty)
    """
    if not layers:
        logger.debug("Nothing to lay out")
        return container.frame.height

    max_right = container.frame.width - settings.right_padding
    height = layers[0].frame.height + settings.bottom_padding
    rows = 1

    last_frame = None
    for layer in layers:
        frame = layer.frame
        if last_frame is None:
            frame = frame.moved_to(settings.margin, settings.margin)
        else:
            next_left = last_frame.right + settings.spacing
            if next_left + frame.width > max_right:
                frame = frame.moved_to(settings.margin, last_frame.bottom + settings.spacing)
                height += frame.height + settings.spacing
                rows += 1
            else:
                frame = frame.moved_to(next_left, last_frame.top)
        layer.frame = frame
        last_frame = frame

    container.frame = container.frame.with_height(height)
    logger.debug(f"Laid out {len(layers)} layer(s) in {rows} row(s), container height {height}")
    return height
