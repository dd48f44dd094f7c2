"""Routes: the paths players run, drawn from the player outward."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterable, Optional, Sequence

from playbook.core.enums import SegmentCommand, Side
from playbook.core.geometry import Rect, distance_to_segment
from playbook.core.models.shape import Shape
from playbook.core.models.zone import Zone

if TYPE_CHECKING:
    from playbook.editor.drag import PathDrag
    from playbook.editor.session import EditorSession


_PATH_TOKEN = re.compile(r"[A-Za-z]|[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def format_number(value: float) -> str:
    """Shortest exact formatting for path strings (100, 133.33333333333334)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True, slots=True)
class PathSegment:
    """One element of a route: the anchor (MoveTo) or a drawn point (LineTo)."""

    command: SegmentCommand
    x: float
    y: float

    @classmethod
    def move_to(cls, x: float, y: float) -> PathSegment:
        return cls(SegmentCommand.MOVE_TO, x, y)

    @classmethod
    def line_to(cls, x: float, y: float) -> PathSegment:
        return cls(SegmentCommand.LINE_TO, x, y)

    @classmethod
    def from_list(cls, item: Sequence) -> PathSegment:
        """Build from a ['L', x, y] triple."""
        if len(item) != 3:
            raise ValueError(f"Path segment needs [command, x, y], got {item!r}")
        try:
            return cls(SegmentCommand(str(item[0]).upper()), float(item[1]), float(item[2]))
        except TypeError:
            raise ValueError(f"Path segment coordinates must be numbers, got {item!r}") from None

    def as_list(self) -> list:
        return [self.command.value, self.x, self.y]

    def __str__(self) -> str:
        return f"{self.command.value}{format_number(self.x)},{format_number(self.y)}"


def parse_path(path: str) -> list[PathSegment]:
    """
    Parse an absolute path string like 'M100,625L150,500 L200,480'.

    Only M and L commands are understood. Extra coordinate pairs after a
    command repeat it, except after M where they become L (as in SVG).

    Raises:
        ValueError: On unknown commands, odd coordinates, or a path not
            starting with M.
    """
    segments: list[PathSegment] = []
    command: Optional[SegmentCommand] = None
    pending: list[float] = []

    for token in _PATH_TOKEN.findall(path):
        if token.isalpha():
            if pending:
                raise ValueError(f"Dangling coordinate in path '{path}'")
            try:
                command = SegmentCommand(token)
            except ValueError:
                raise ValueError(f"Unsupported path command '{token}'") from None
            continue
        if command is None:
            raise ValueError(f"Path '{path}' must start with a command")
        pending.append(float(token))
        if len(pending) == 2:
            segments.append(PathSegment(command, pending[0], pending[1]))
            pending = []
            if command == SegmentCommand.MOVE_TO:
                command = SegmentCommand.LINE_TO

    if pending:
        raise ValueError(f"Dangling coordinate in path '{path}'")
    validate_segments(segments)
    return segments


def validate_segments(segments: Sequence[PathSegment]) -> None:
    """Segment 0 must be the only MoveTo."""
    if not segments:
        raise ValueError("A route needs at least a MoveTo segment")
    if segments[0].command != SegmentCommand.MOVE_TO:
        raise ValueError("A route must start with a MoveTo segment")
    for segment in segments[1:]:
        if segment.command != SegmentCommand.LINE_TO:
            raise ValueError("Only the first route segment may be a MoveTo")


def format_path(segments: Iterable[PathSegment]) -> str:
    return "".join(str(segment) for segment in segments)


@dataclass(eq=False)
class Route(Shape):
    """
    A route drawn from a player.

    Segment 0 is the MoveTo anchor and always sits on the owning player;
    the LineTo segments follow in drawn order.
    """

    segments: list[PathSegment]
    side: Side
    stroke: str
    stroke_width: float = 20
    stroke_opacity: float = 1.0
    zone: Optional[Zone] = None

    kind: ClassVar[str] = "path"
    draggable: ClassVar[bool] = True

    def __post_init__(self) -> None:
        self.segments = list(self.segments)
        validate_segments(self.segments)

    @property
    def first_segment(self) -> PathSegment:
        return self.segments[0]

    @property
    def last_segment(self) -> PathSegment:
        return self.segments[-1]

    @property
    def line_count(self) -> int:
        """Number of drawn (LineTo) segments."""
        return len(self.segments) - 1

    @property
    def has_zone(self) -> bool:
        return self.zone is not None and not self.zone.removed

    @property
    def path_string(self) -> str:
        return format_path(self.segments)

    def points(self) -> list[tuple[float, float]]:
        return [(segment.x, segment.y) for segment in self.segments]

    def bounds(self) -> Rect:
        xs = [segment.x for segment in self.segments]
        ys = [segment.y for segment in self.segments]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def set_path(self, segments: Sequence[PathSegment]) -> None:
        """Replace the whole segment list. No-op once removed."""
        if self.removed:
            return
        segments = list(segments)
        validate_segments(segments)
        self.segments = segments

    def move_path_start(self, x: float, y: float) -> None:
        """Move the MoveTo anchor, leaving the drawn shape untouched."""
        if self.removed:
            return
        self.segments = [PathSegment.move_to(x, y)] + self.segments[1:]

    def set_segment(self, index: int, x: float, y: float) -> bool:
        """
        Write a LineTo point at index.

        index == len(segments) appends. Index 0 (the anchor) and indices
        past the end are never written.

        Returns:
            True if the path changed
        """
        if self.removed or index <= 0 or index > len(self.segments):
            return False
        segment = PathSegment.line_to(x, y)
        if index == len(self.segments):
            self.segments.append(segment)
        else:
            self.segments[index] = segment
        return True

    def distance_to(self, px: float, py: float) -> float:
        """Shortest distance from a point to the drawn stroke."""
        points = self.points()
        if len(points) == 1:
            ax, ay = points[0]
            return distance_to_segment(px, py, ax, ay, ax, ay)
        return min(
            distance_to_segment(px, py, ax, ay, bx, by)
            for (ax, ay), (bx, by) in zip(points, points[1:])
        )

    def drag(self, session: EditorSession) -> PathDrag:
        from playbook.editor.drag import PathDrag

        return PathDrag(session=session, route=self)
