"""Editor entity models."""

from playbook.core.models.player import PLAYER_RADIUS, Player
from playbook.core.models.route import PathSegment, Route, format_path, parse_path
from playbook.core.models.shape import Shape
from playbook.core.models.zone import Zone

__all__ = [
    "PLAYER_RADIUS",
    "PathSegment",
    "Player",
    "Route",
    "Shape",
    "Zone",
    "format_path",
    "parse_path",
]
