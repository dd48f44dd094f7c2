"""Editor enumerations."""

from playbook.core.enums.editor import Mode, SegmentCommand, Side

__all__ = [
    "Mode",
    "SegmentCommand",
    "Side",
]
