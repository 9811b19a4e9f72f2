from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from .. import board as b
from .. import config


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index 0-8 on click

    def __init__(self, parent=None):
        super().__init__(parent)
        self.cells = tuple(b.new_board())
        self.winning_line = ()
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self.setAccessibleName("Tic Tac Toe board")
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def set_snapshot(self, snap):
        """copy what we draw from a controller snapshot"""
        self.cells = snap.board
        self.winning_line = snap.winning_line
        self.set_accept_clicks(snap.active and not snap.thinking)
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square drawing area centred in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def paintEvent(self, event):
        """
        draw cells, grid, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            painter.fillRect(self.rect(), QColor(config.WINDOW_COLOR))
            size = b.SIZE
            cell_size = side / size
            # cell backgrounds, winning cells tinted
            for idx in range(size * size):
                r, c = divmod(idx, size)
                color = config.WIN_CELL_COLOR if idx in self.winning_line else config.CELL_COLOR
                painter.fillRect(QRectF(ox + c*cell_size, oy + r*cell_size, cell_size, cell_size),
                                 QColor(color))
            # grid lines
            painter.setPen(QPen(QColor(config.GRID_COLOR), 2))
            for i in range(1, size):
                x = ox + i*cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy+side))
                y = oy + i*cell_size
                painter.drawLine(int(ox), int(y), int(ox+side), int(y))
            # marks
            for idx, sym in enumerate(self.cells):
                if not sym:
                    continue
                r, c = divmod(idx, size)
                cx = ox + c*cell_size + cell_size/2
                cy = oy + r*cell_size + cell_size/2
                rad = cell_size/2 * 0.6
                width = 7 if idx in self.winning_line else 5
                if sym == b.X:
                    painter.setPen(QPen(QColor(config.PRIMARY), width, Qt.SolidLine, Qt.RoundCap))
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(config.ACCENT), width))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / b.SIZE
        col = min(int((x-ox) // cell), b.SIZE-1)
        row = min(int((y-oy) // cell), b.SIZE-1)
        return row * b.SIZE + col

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks:
            return
        pos = event.position()
        idx = self.cell_at(pos.x(), pos.y())
        if idx is not None:
            self.cell_clicked.emit(idx)  # notify main window
