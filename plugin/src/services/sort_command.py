"""
Sort Background Colors - Sort By Hue Command

Entry point of the plugin. Sorts the selected layers (or the children of
a single selected artboard) by background hue and arranges them in a grid.
When layers are selected loosely they are moved into a new artboard first.

Usage:
    sort_by_hue(document, selection)

    # Or keep the command around to inspect how it ended
    command = SortByHueCommand(document, selection)
    command.run()
    command.state  # SortState.DONE
"""

import logging
from enum import Enum
from typing import List, Sequence

from constants import MSG_NO_SELECTION, MSG_NO_COLORABLE_LAYERS
from models.frame import Frame
from models.layer import Layer, LayerKind
from services.background import layers_with_background
from services.hue_sort import sort_layers_by_hue
from services.layout import layout_layers
from utils.config import LayoutSettings, DEFAULT_SETTINGS
from utils.logger import loggerRaise


class SortState(Enum):
    IDLE = 'idle'
    VALIDATING = 'validating'
    FAILED_NO_SELECTION = 'failed_no_selection'
    FAILED_NO_COLORABLE_LAYERS = 'failed_no_colorable_layers'
    PREPARING = 'preparing'
    SORTING = 'sorting'
    LAYING_OUT = 'laying_out'
    DONE = 'done'


class HueSortError(Exception):
    """Aborts the command; the message is shown to the user"""

    failed_state = None

    def __init__(self, user_message: str):
        super().__init__(user_message)
        self.user_message = user_message


class NoSelectionError(HueSortError):
    failed_state = SortState.FAILED_NO_SELECTION

    def __init__(self):
        super().__init__(MSG_NO_SELECTION)


class NoColorableLayersError(HueSortError):
    failed_state = SortState.FAILED_NO_COLORABLE_LAYERS

    def __init__(self):
        super().__init__(MSG_NO_COLORABLE_LAYERS)


class SortByHueCommand:
    """One invocation of the sort-by-hue action

    Args:
        document: Host document (current_page, show_message)
        selection: Ordered selected layers
        settings: Layout metrics and new-artboard defaults
    """

    def __init__(self, document, selection: Sequence, settings: LayoutSettings = DEFAULT_SETTINGS):
        self._logger = logging.getLogger('SortByHue')
        self.document = document
        self.selection = list(selection)
        self.settings = settings
        self.state = SortState.IDLE
        self.artboard = None

    def _set_state(self, state: SortState):
        self._logger.debug(f"{self.state.value} -> {state.value}")
        self.state = state

    def run(self):
        """Execute the command; user errors end up as a document message"""
        try:
            self._run()
        except HueSortError as e:
            self._logger.warning(e.user_message)
            self._set_state(e.failed_state)
            self.document.show_message(e.user_message)
        except Exception as e:
            loggerRaise(e, "Sorting layers by hue failed")

    def _run(self):
        self._set_state(SortState.VALIDATING)
        layers = self.selection
        artboard = None

        # A single selected artboard means: sort its children
        if len(layers) == 1 and layers[0].kind is LayerKind.ARTBOARD:
            artboard = layers[0]
            layers = list(artboard.layers)

        if len(layers) < 1:
            raise NoSelectionError()

        layers = layers_with_background(layers)
        if len(layers) < 1:
            raise NoColorableLayersError()

        if artboard is None:
            self._set_state(SortState.PREPARING)
            artboard = self._create_artboard(layers)
            layers = layers_with_background(artboard.layers)
        self.artboard = artboard

        self._set_state(SortState.SORTING)
        sort_layers_by_hue(layers)

        self._set_state(SortState.LAYING_OUT)
        height = layout_layers(artboard, layers, self.settings)

        self._set_state(SortState.DONE)
        self._logger.info(f"Sorted {len(layers)} layer(s) in {artboard.name!r}, height {height}")

    def _create_artboard(self, layers: List) -> Layer:
        """Move copies of the layers into a new artboard on the current page"""
        origin = layers[0].frame
        artboard = Layer.new_artboard(
            self.settings.container_name,
            Frame(origin.left, origin.top,
                  self.settings.container_width, self.settings.container_height),
        )
        self.document.current_page.add_layer(artboard)
        for layer in layers:
            artboard.add_layer(layer.copy())
            layer.remove_from_parent()
        self._logger.debug(f"Created artboard {artboard.name!r} with {len(layers)} layer(s)")
        return artboard


def sort_by_hue(document, selection: Sequence, settings: LayoutSettings = DEFAULT_SETTINGS):
    """Sort selected layers by background hue (plugin entry point)"""
    SortByHueCommand(document, selection, settings).run()
