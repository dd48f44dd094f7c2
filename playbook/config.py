"""
Editor configuration.

Field dimensions, grid, and styling used by an editor session.
All settings can be overridden via environment variables.
"""

import os
from dataclasses import dataclass, field, fields, replace
from typing import Any, Optional


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return float(value)


@dataclass
class FieldOptions:
    """Configuration for one editor session's field and styling."""

    # Field geometry
    grid_size: float = field(default_factory=lambda: _env_float("PLAYBOOK_GRID_SIZE", 25))
    field_width: float = field(default_factory=lambda: _env_float("PLAYBOOK_FIELD_WIDTH", 1200))
    field_height: float = field(default_factory=lambda: _env_float("PLAYBOOK_FIELD_HEIGHT", 900))
    yard_line_gap: float = 100  # Distance between 10-yard lines
    yard_line_height: float = 8
    yard_marker_width: float = 50

    # Styling
    route_width: float = field(default_factory=lambda: _env_float("PLAYBOOK_ROUTE_WIDTH", 20))
    colors: dict[str, str] = field(
        default_factory=lambda: {"offense": "#e33232", "defense": "#323ae3"}
    )
    route_opacity: dict[str, float] = field(
        default_factory=lambda: {"offense": 1.0, "defense": 0.75}
    )

    # Starting interaction mode
    mode: str = field(default_factory=lambda: os.getenv("PLAYBOOK_MODE", "move"))

    @property
    def line_of_scrimmage(self) -> float:
        """Y coordinate of the line of scrimmage (three yard gaps from the bottom)."""
        return self.field_height - 3 * self.yard_line_gap

    def color_for(self, side: str) -> str:
        return self.colors[side]

    def opacity_for(self, side: str) -> float:
        """Route/zone opacity for a side; 1 when not configured."""
        return self.route_opacity.get(side) or 1.0

    @classmethod
    def from_env(cls) -> "FieldOptions":
        """Create config from environment variables."""
        return cls()

    @classmethod
    def from_dict(cls, options: Optional[dict[str, Any]] = None) -> "FieldOptions":
        """
        Build options from a partial mapping, ignoring unknown keys.

        Missing keys fall back to the environment/defaults.
        """
        base = cls()
        if not options:
            return base
        known = {f.name for f in fields(cls)}
        overrides = {k: v for k, v in options.items() if k in known and v is not None}
        return replace(base, **overrides)

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.grid_size <= 0:
            errors.append("grid_size must be positive")
        if self.field_width <= 0:
            errors.append("field_width must be positive")
        if self.field_height <= 0:
            errors.append("field_height must be positive")
        if self.route_width <= 0:
            errors.append("route_width must be positive")
        if self.mode not in ("move", "design"):
            errors.append(f"mode must be 'move' or 'design', got '{self.mode}'")
        for side in ("offense", "defense"):
            if side not in self.colors:
                errors.append(f"colors is missing '{side}'")
        return errors


# Singleton config instance
_config: Optional[FieldOptions] = None


def get_config() -> FieldOptions:
    """Get the global editor configuration."""
    global _config
    if _config is None:
        _config = FieldOptions.from_env()
    return _config


def set_config(config: FieldOptions) -> None:
    """Override the global configuration (tests, CLI flags)."""
    global _config
    _config = config
