"""
Sort Background Colors - Layer Scene Graph Model

In-memory stand-in for the host application's layer tree. Provides the
handle surface the sorting services rely on:
- Kind inspection (closed set of layer kinds)
- Frame read / atomic replace
- Ordered fill list
- Parent/child relationships (add, remove from parent, copy)

This is part of the MODEL layer - pure data, no UI logic.

Usage:
    shape = Layer.new_shape('Swatch', Frame(0, 0, 40, 20), Color(1, 0, 0))
    board = Layer.new_artboard('Colors', Frame(0, 0, 600, 600))
    board.add_layer(shape.copy())
    shape.remove_from_parent()
"""

import logging
import uuid as uuid_module
from enum import Enum
from dataclasses import dataclass
from typing import List, Optional, Tuple

from models.color import Color
from models.frame import Frame


class LayerKind(Enum):
    """Closed set of layer kinds the host can hand over"""
    SHAPE = 'shape'
    SYMBOL_INSTANCE = 'symbol_instance'
    SYMBOL_MASTER = 'symbol_master'
    ARTBOARD = 'artboard'
    TEXT = 'text'
    GROUP = 'group'


@dataclass(frozen=True)
class Fill:
    """Single fill entry of a layer style"""
    color: Color


class ChildLayersMixin:
    """Ordered child list shared by layers and pages

    Requires:
        - self._children: list of Layer
    """

    @property
    def layers(self) -> Tuple['Layer', ...]:
        """Direct children in z-order (bottom first)"""
        return tuple(self._children)

    def add_layer(self, layer: 'Layer') -> 'Layer':
        """Append a layer as the top-most child

        A layer that already has a parent is detached from it first.

        Returns:
            The added layer
        """
        if layer.parent is not None:
            layer.remove_from_parent()
        self._children.append(layer)
        layer._parent = self
        return layer

    def _remove_child(self, layer: 'Layer'):
        self._children.remove(layer)
        layer._parent = None


class Layer(ChildLayersMixin):
    """Handle for a single layer in the scene graph

    Properties:
        uuid: Stable identifier (new for every copy)
        kind: LayerKind tag
        name: Display name (settable)
        frame: Frame in parent coordinates (replace as a whole)
        fills: Ordered fill list
        layers: Direct children
        parent: Parent layer or page, None when detached
        symbol_master: Backing definition of a symbol instance
    """

    _logger = logging.getLogger('Layer')

    def __init__(self, kind: LayerKind, name: str = '', frame: Optional[Frame] = None,
                 fills: Optional[List[Fill]] = None, layers: Optional[List['Layer']] = None,
                 symbol_master: Optional['Layer'] = None):
        if not isinstance(kind, LayerKind):
            raise TypeError(f"Layer kind must be a LayerKind, got {kind!r}")
        if kind is LayerKind.SYMBOL_INSTANCE and symbol_master is None:
            raise ValueError("Symbol instances need a symbol master")

        self._uuid = str(uuid_module.uuid4())
        self._kind = kind
        self._name = name
        self._frame = frame if frame is not None else Frame(0, 0, 0, 0)
        self._fills = list(fills) if fills else []
        self._symbol_master = symbol_master
        self._parent = None
        self._children = []
        for child in layers or []:
            self.add_layer(child)

    # ========================================
    # Factories
    # ========================================

    @classmethod
    def new_shape(cls, name: str, frame: Frame, *colors: Color) -> 'Layer':
        """Shape layer with one fill per given color (first = background)"""
        return cls(LayerKind.SHAPE, name, frame, fills=[Fill(c) for c in colors])

    @classmethod
    def new_text(cls, name: str, frame: Frame) -> 'Layer':
        return cls(LayerKind.TEXT, name, frame)

    @classmethod
    def new_group(cls, name: str, frame: Frame, layers: Optional[List['Layer']] = None) -> 'Layer':
        return cls(LayerKind.GROUP, name, frame, layers=layers)

    @classmethod
    def new_artboard(cls, name: str, frame: Frame, layers: Optional[List['Layer']] = None) -> 'Layer':
        return cls(LayerKind.ARTBOARD, name, frame, layers=layers)

    @classmethod
    def new_symbol_master(cls, name: str, frame: Frame, layers: Optional[List['Layer']] = None) -> 'Layer':
        return cls(LayerKind.SYMBOL_MASTER, name, frame, layers=layers)

    @classmethod
    def new_symbol_instance(cls, master: 'Layer', frame: Optional[Frame] = None, name: str = '') -> 'Layer':
        """Instance of a symbol master, sized like the master by default"""
        if master.kind is not LayerKind.SYMBOL_MASTER:
            raise ValueError(f"Expected a symbol master, got {master.kind.value}")
        return cls(LayerKind.SYMBOL_INSTANCE, name or master.name,
                   frame if frame is not None else master.frame,
                   symbol_master=master)

    # ========================================
    # Properties
    # ========================================

    @property
    def uuid(self) -> str:
        return self._uuid

    @property
    def kind(self) -> LayerKind:
        return self._kind

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = str(value)

    @property
    def frame(self) -> Frame:
        return self._frame

    @frame.setter
    def frame(self, value: Frame):
        """Replace the frame in one step"""
        if not isinstance(value, Frame):
            raise TypeError(f"Expected Frame, got {type(value).__name__}")
        self._frame = value

    @property
    def fills(self) -> Tuple[Fill, ...]:
        return tuple(self._fills)

    @property
    def parent(self):
        return self._parent

    @property
    def symbol_master(self) -> Optional['Layer']:
        return self._symbol_master

    # ========================================
    # Tree operations
    # ========================================

    def remove_from_parent(self):
        """Detach from the current parent (no-op when already detached)"""
        if self._parent is None:
            return
        self._parent._remove_child(self)
        self._logger.debug(f"Removed layer {self._name!r} ({self._uuid}) from parent")

    def copy(self) -> 'Layer':
        """Detached deep copy with a fresh UUID

        Children are copied recursively. Symbol instances keep pointing at
        the same master.
        """
        duplicate = Layer(
            self._kind,
            self._name,
            self._frame,
            fills=self._fills,
            layers=[child.copy() for child in self._children],
            symbol_master=self._symbol_master,
        )
        self._logger.debug(f"Copied layer {self._name!r} ({self._uuid} -> {duplicate.uuid})")
        return duplicate

    def __repr__(self) -> str:
        return f"Layer({self._kind.value}, {self._name!r})"
