from dataclasses import dataclass


@dataclass
class Rect:
    """Axis-aligned rectangle in content coordinates.

    Used as the focus of a view: the center of the box is the pivot for
    rotation, and the box as a whole is what `center()` brings into view.
    Zero-sized boxes are valid.
    """
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)
