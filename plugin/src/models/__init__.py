"""
Sort Background Colors - Data Models

Color model plus the in-memory scene graph (documents, pages, layers)
that the sorting services operate on. This is the MODEL layer.
"""

from .color import Color, HueDescriptor, hsv_of
from .frame import Frame
from .layer import Layer, LayerKind, Fill
from .document import Document, Page

__all__ = ['Color', 'HueDescriptor', 'hsv_of', 'Frame', 'Layer', 'LayerKind', 'Fill', 'Document', 'Page']
