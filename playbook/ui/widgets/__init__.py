"""Textual widgets for the play editor."""

from playbook.ui.widgets.field_canvas import FieldCanvas, cell_to_field, field_to_cell

__all__ = ["FieldCanvas", "cell_to_field", "field_to_cell"]
