"""Interactive editing: sessions and drag gestures."""

from playbook.editor.drag import DragGesture, PathDrag, PlayerDrag
from playbook.editor.session import EditorSession

__all__ = [
    "DragGesture",
    "EditorSession",
    "PathDrag",
    "PlayerDrag",
]
