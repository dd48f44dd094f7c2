"""Constants for the Playbook TUI."""

# Mode labels shown in the status bar
MODES = {
    "move": "Move players",
    "design": "Design routes",
}

DEFAULT_EXPORT_PATH = "play.json"
