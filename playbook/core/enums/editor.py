"""Sides, interaction modes and path commands."""

from enum import Enum


class Side(Enum):
    """Which team a token (and anything it owns) belongs to."""

    OFFENSE = "offense"
    DEFENSE = "defense"


class Mode(Enum):
    """Editor-wide interaction mode."""

    MOVE = "move"  # Reposition tokens
    DESIGN = "design"  # Draw/edit routes and zones

    @classmethod
    def parse(cls, value: "Mode | str") -> "Mode":
        """Accept a Mode or its string value ('move', 'design')."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown mode '{value}', expected 'move' or 'design'") from None


class SegmentCommand(Enum):
    """Path commands a route segment can carry."""

    MOVE_TO = "M"  # Anchor, always first
    LINE_TO = "L"  # Drawn point
