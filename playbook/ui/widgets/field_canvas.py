"""Terminal rendering of the field, and mouse drags fed to the editor."""

from typing import Optional

from rich.text import Text
from textual import events
from textual.message import Message
from textual.widget import Widget

from playbook.config import FieldOptions
from playbook.core.enums import Side
from playbook.core.models import Player, Route, Zone
from playbook.editor import DragGesture, EditorSession

# Turf stripes alternate every yard-line gap
TURF_LIGHT = "#3a8c3a"
TURF_DARK = "#306f30"
LINE_COLOR = "#f0fff0"

PLAYER_SYMBOLS = {
    Side.OFFENSE: "O",
    Side.DEFENSE: "X",
}
ROUTE_SYMBOL = "•"
ZONE_SYMBOL = "░"


def cell_to_field(col: int, row: int, cols: int, rows: int, options: FieldOptions) -> tuple[float, float]:
    """Field coordinates at the centre of a terminal cell."""
    cell_w = options.field_width / max(cols, 1)
    cell_h = options.field_height / max(rows, 1)
    return ((col + 0.5) * cell_w, (row + 0.5) * cell_h)


def field_to_cell(x: float, y: float, cols: int, rows: int, options: FieldOptions) -> tuple[int, int]:
    """Terminal cell containing a field point (clamped to the grid)."""
    col = int(x * cols / options.field_width)
    row = int(y * rows / options.field_height)
    return (max(0, min(cols - 1, col)), max(0, min(rows - 1, row)))


def _line_cells(a: tuple[int, int], b: tuple[int, int]) -> list[tuple[int, int]]:
    """Cells along a line between two cells (Bresenham)."""
    (x0, y0), (x1, y1) = a, b
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    cells = []
    while True:
        cells.append((x0, y0))
        if x0 == x1 and y0 == y1:
            return cells
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


class FieldCanvas(Widget):
    """
    The play diagram.

    Paints the session's canvas bottom to top as Rich text and turns
    mouse down/move/up into a drag gesture on whatever was pressed.
    """

    DEFAULT_CSS = """
    FieldCanvas {
        width: 1fr;
        height: 1fr;
    }
    """

    class Edited(Message):
        """Posted when a gesture finishes."""

    def __init__(self, session: EditorSession, **kwargs) -> None:
        super().__init__(**kwargs)
        self.session = session
        self._gesture: Optional[DragGesture] = None
        self._press: tuple[float, float] = (0.0, 0.0)

    # Coordinate helpers bound to the current widget size

    def _to_field(self, col: int, row: int) -> tuple[float, float]:
        return cell_to_field(col, row, self.size.width, self.size.height, self.session.options)

    def _to_cell(self, x: float, y: float) -> tuple[int, int]:
        return field_to_cell(x, y, self.size.width, self.size.height, self.session.options)

    def _cell_slack(self) -> float:
        """Half a cell diagonal in field units, so a click lands on small shapes."""
        options = self.session.options
        cell_w = options.field_width / max(self.size.width, 1)
        cell_h = options.field_height / max(self.size.height, 1)
        return max(cell_w, cell_h) / 2

    # Rendering

    def render(self) -> Text:
        cols, rows = self.size.width, self.size.height
        if cols <= 0 or rows <= 0:
            return Text()

        options = self.session.options
        chars = [[" "] * cols for _ in range(rows)]
        styles = [[""] * cols for _ in range(rows)]

        for row in range(rows):
            _, y = self._to_field(0, row)
            band = int(y // options.yard_line_gap)
            turf = TURF_DARK if band % 2 else TURF_LIGHT
            on_line = (
                self._to_cell(0, band * options.yard_line_gap)[1] == row
                and band * options.yard_line_gap > 0
            )
            for col in range(cols):
                styles[row][col] = f"on {turf}"
                if on_line:
                    chars[row][col] = "─"
                    styles[row][col] = f"{LINE_COLOR} on {turf}"

        for shape in self.session.canvas.stack:
            if isinstance(shape, Zone):
                self._paint_zone(shape, chars, styles)
            elif isinstance(shape, Route):
                self._paint_route(shape, chars, styles)
            elif isinstance(shape, Player):
                col, row = self._to_cell(shape.x, shape.y)
                chars[row][col] = PLAYER_SYMBOLS[shape.side]
                styles[row][col] = f"bold #ffffff on {shape.fill}"

        text = Text()
        for row in range(rows):
            for col in range(cols):
                text.append(chars[row][col], style=styles[row][col])
            if row < rows - 1:
                text.append("\n")
        return text

    def _paint_zone(self, zone: Zone, chars: list[list[str]], styles: list[list[str]]) -> None:
        if zone.width <= 0 or zone.height <= 0:
            return
        left, top = self._to_cell(zone.x, zone.y)
        right, bottom = self._to_cell(zone.x + zone.width, zone.y + zone.height)
        for row in range(top, bottom + 1):
            for col in range(left, right + 1):
                chars[row][col] = ZONE_SYMBOL
                styles[row][col] = f"{zone.fill} on {styles[row][col].split('on ')[-1]}"

    def _paint_route(self, route: Route, chars: list[list[str]], styles: list[list[str]]) -> None:
        cells = [self._to_cell(x, y) for x, y in route.points()]
        dim = " dim" if route.stroke_opacity < 1 else ""
        for a, b in zip(cells, cells[1:]):
            for col, row in _line_cells(a, b):
                chars[row][col] = ROUTE_SYMBOL
                styles[row][col] = f"bold{dim} {route.stroke} on {styles[row][col].split('on ')[-1]}"

    # Mouse handling: the host side of the drag primitive

    def on_mouse_down(self, event: events.MouseDown) -> None:
        x, y = self._to_field(event.x, event.y)
        slack = self._cell_slack()

        player = self.session.player_at(x, y, tolerance=slack)
        if player is not None:
            self._gesture = self.session.drag_player(player)
        else:
            route = self.session.route_at(x, y, tolerance=slack)
            if route is None:
                return
            self._gesture = self.session.drag_route(route)

        self._press = (x, y)
        self._gesture.on_start(x, y)
        self.capture_mouse()
        self.refresh()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self._gesture is None:
            return
        x, y = self._to_field(event.x, event.y)
        self._gesture.on_move(x - self._press[0], y - self._press[1], x, y)
        self.refresh()

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if self._gesture is None:
            return
        self._gesture.on_end()
        self._gesture = None
        self.release_mouse()
        self.session.canvas.drain_transitions()
        self.refresh()
        self.post_message(self.Edited())
