"""Frame rectangle for layer geometry."""
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Frame:
    """Layer rectangle in parent coordinates.

    Frames are values: a layer is moved or resized by assigning a whole
    new Frame, so no half-updated rectangle is ever observable.
    """
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def moved_to(self, left: float, top: float) -> 'Frame':
        """Same size, new top-left corner."""
        return replace(self, left=left, top=top)

    def with_height(self, height: float) -> 'Frame':
        return replace(self, height=height)

    def __iter__(self):
        """Allow tuple unpacking: left, top, width, height = frame"""
        return iter((self.left, self.top, self.width, self.height))
