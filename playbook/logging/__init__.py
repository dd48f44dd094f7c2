"""Edit logging."""

from playbook.logging.edit_log import EditLog, EditSummary, LogEntry

__all__ = ["EditLog", "EditSummary", "LogEntry"]
