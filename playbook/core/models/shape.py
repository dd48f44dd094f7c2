"""Base class for everything the editor places on the field."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from playbook.core.geometry import Rect
    from playbook.editor.drag import DragGesture
    from playbook.editor.session import EditorSession


@dataclass(eq=False)
class Shape(ABC):
    """
    A primitive on the drawing surface.

    Concrete kinds (player token, route path, zone rect) expose the editing
    operations that apply to them as methods. Shapes compare by identity.
    """

    id: UUID = field(default_factory=uuid4, kw_only=True)
    removed: bool = field(default=False, kw_only=True, repr=False)

    kind: ClassVar[str] = "shape"
    draggable: ClassVar[bool] = False

    @abstractmethod
    def bounds(self) -> Rect:
        """Axis-aligned bounding box in field coordinates."""

    def drag(self, session: EditorSession) -> DragGesture:
        """Begin a drag gesture on this shape."""
        raise TypeError(f"'{self.kind}' shapes are not draggable")

    def mark_removed(self) -> None:
        """Flag the shape as destroyed; later edits become no-ops."""
        self.removed = True
