"""Coverage zones attached to defensive routes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from playbook.core.geometry import Rect
from playbook.core.models.shape import Shape

ZONE_CORNER_RADIUS = 20


@dataclass(eq=False)
class Zone(Shape):
    """Rounded rectangle marking the area a defender covers."""

    x: float
    y: float
    width: float
    height: float
    fill: str
    fill_opacity: float = 1.0
    radius: float = ZONE_CORNER_RADIUS

    kind: ClassVar[str] = "rect"

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def bounds(self) -> Rect:
        return self.rect

    def reshape(self, rect: Rect) -> None:
        """Replace the zone geometry. No-op once removed."""
        if self.removed:
            return
        self.x = rect.x
        self.y = rect.y
        self.width = rect.width
        self.height = rect.height
