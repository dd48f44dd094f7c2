"""In-memory shape layer: which shapes exist and their stacking order."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, TypeVar
from uuid import UUID

from playbook.core.models.shape import Shape

S = TypeVar("S", bound=Shape)


@dataclass
class Transition:
    """A requested animation of shape attributes, for renderers that animate."""

    shape_id: UUID
    attrs: dict[str, float]
    duration_ms: int


@dataclass
class Canvas:
    """
    Registry of live shapes, ordered bottom to top.

    The editor core creates, destroys and restacks shapes through this
    object. It knows nothing about painting; hosts read `stack` to draw.
    """

    _shapes: dict[UUID, Shape] = field(default_factory=dict)
    _order: list[UUID] = field(default_factory=list)
    _transitions: list[Transition] = field(default_factory=list)

    def add(self, shape: Shape) -> Shape:
        """Register a shape on top of the stack (idempotent)."""
        if shape.id not in self._shapes:
            self._shapes[shape.id] = shape
            self._order.append(shape.id)
        return shape

    def remove(self, shape: Shape) -> bool:
        """
        Destroy a shape.

        Returns:
            True if the shape was live and is now removed
        """
        if shape.removed:
            return False
        shape.mark_removed()
        if shape.id in self._shapes:
            del self._shapes[shape.id]
            self._order.remove(shape.id)
        return True

    def to_front(self, shape: Shape) -> None:
        """Move a shape to the top of the stack."""
        if shape.id not in self._shapes:
            return
        self._order.remove(shape.id)
        self._order.append(shape.id)

    def animate(self, shape: Shape, attrs: dict[str, float], duration_ms: int) -> Transition:
        """Queue a transition; it never blocks the caller."""
        transition = Transition(shape_id=shape.id, attrs=dict(attrs), duration_ms=duration_ms)
        self._transitions.append(transition)
        return transition

    def drain_transitions(self) -> list[Transition]:
        """Hand pending transitions to a renderer and forget them."""
        pending, self._transitions = self._transitions, []
        return pending

    @property
    def stack(self) -> list[Shape]:
        """Live shapes, bottom first."""
        return [self._shapes[shape_id] for shape_id in self._order]

    def get(self, shape_id: UUID) -> Optional[Shape]:
        return self._shapes.get(shape_id)

    def of_type(self, shape_type: type[S]) -> list[S]:
        """Live shapes of one kind, bottom first."""
        return [shape for shape in self.stack if isinstance(shape, shape_type)]

    def index_of(self, shape: Shape) -> int:
        """Stack position (0 = bottom); -1 if not on the canvas."""
        try:
            return self._order.index(shape.id)
        except ValueError:
            return -1

    def clear(self) -> None:
        for shape in self._shapes.values():
            shape.mark_removed()
        self._shapes.clear()
        self._order.clear()
        self._transitions.clear()

    def __contains__(self, shape: Shape) -> bool:
        return shape.id in self._shapes

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.stack)

    def __len__(self) -> int:
        return len(self._order)
