"""Play import/export."""

from playbook.exchange.play_io import export_play, import_play
from playbook.exchange.schemas import PlayData, PlayerRecord, ZoneRecord

__all__ = [
    "PlayData",
    "PlayerRecord",
    "ZoneRecord",
    "export_play",
    "import_play",
]
