import sys
from PyQt6 import QtWidgets, QtCore, QtGui

from pong_input import key_direction
from pong_loop import GameLoop
from pong_render import BACKGROUND, render

FPS = 60

QT_KEYS = {
    QtCore.Qt.Key.Key_Up: "up",
    QtCore.Qt.Key.Key_W: "w",
    QtCore.Qt.Key.Key_Down: "down",
    QtCore.Qt.Key.Key_S: "s",
}

class QtSurface:
    def __init__(self, qp, width, height):
        self.qp = qp
        self.width = width
        self.height = height

    def clear(self):
        self.qp.fillRect(QtCore.QRectF(0, 0, self.width, self.height), QtGui.QColor(*BACKGROUND))

    def fill_rect(self, x, y, w, h, color):
        self.qp.fillRect(QtCore.QRectF(x, y, w, h), QtGui.QColor(*color))

    def fill_circle(self, cx, cy, r, color):
        self.qp.setPen(QtCore.Qt.PenStyle.NoPen)
        self.qp.setBrush(QtGui.QColor(*color))
        self.qp.drawEllipse(QtCore.QPointF(cx, cy), r, r)

    def stroke_line(self, x1, y1, x2, y2, color, dash=None):
        pen = QtGui.QPen(QtGui.QColor(*color))
        if dash:
            pen.setDashPattern([float(d) for d in dash])
        self.qp.setPen(pen)
        self.qp.drawLine(QtCore.QPointF(x1, y1), QtCore.QPointF(x2, y2))

class GameWidget(QtWidgets.QWidget):
    def __init__(self, loop):
        super().__init__()
        self.loop = loop
        st = loop.state
        self.setFixedSize(int(st.width), int(st.height))
        self.setMouseTracking(True)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)

    def paintEvent(self, event):
        st = self.loop.state
        qp = QtGui.QPainter(self)
        qp.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing)
        render(st, QtSurface(qp, st.width, st.height))
        qp.end()

    def mouseMoveEvent(self, e):
        if self.loop.state.over:
            return
        self.loop.inputs.pointer_move(e.position().y())

    def keyPressEvent(self, e):
        d = key_direction(QT_KEYS.get(e.key()))
        if d is None:
            super().keyPressEvent(e)
            return
        if e.isAutoRepeat() or self.loop.state.over:
            return
        self.loop.inputs.press(d)

    def keyReleaseEvent(self, e):
        d = key_direction(QT_KEYS.get(e.key()))
        if d is None:
            super().keyReleaseEvent(e)
            return
        if not e.isAutoRepeat():
            self.loop.inputs.release(d)

class MainWindow(QtWidgets.QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("PONG")

        self.score_left = QtWidgets.QLabel("0")
        self.score_right = QtWidgets.QLabel("0")
        self.win_label = QtWidgets.QLabel()

        self.loop = GameLoop(
            draw=self.redraw,
            on_score=self.on_score,
            on_game_over=self.on_game_over,
        )
        self.game_widget = GameWidget(self.loop)
        self.win_label.setText(f"first to {self.loop.state.win_score}")

        self.init_ui()

        self.timer = QtCore.QTimer(self)
        self.timer.timeout.connect(self.loop.tick)
        self.timer.start(1000 // FPS)

        self.setStyleSheet("""
            QWidget {
                background-color: #111;
                color: #eee;
            }

            QLabel {
                font-family: Arial;
                font-size: 24px;
                font-weight: bold;
            }
        """)

    def init_ui(self):
        top = QtWidgets.QHBoxLayout()
        top.addWidget(self.score_left)
        top.addStretch(1)
        top.addWidget(self.win_label)
        top.addStretch(1)
        top.addWidget(self.score_right)

        main_layout = QtWidgets.QVBoxLayout(self)
        main_layout.addLayout(top)
        main_layout.addWidget(self.game_widget)
        self.game_widget.setFocus()

    def redraw(self, state):
        self.game_widget.update()

    def on_score(self, left, right):
        self.score_left.setText(str(left))
        self.score_right.setText(str(right))

    def on_game_over(self, winner):
        self.timer.stop()
        # show the modal after the final frame has been painted
        QtCore.QTimer.singleShot(0, lambda: self.announce_winner(winner))

    def announce_winner(self, winner):
        QtWidgets.QMessageBox.information(self, "WIN", f"{winner} player wins!")
        self.loop.restart()
        self.game_widget.setFocus()
        self.timer.start(1000 // FPS)

def main():
    app = QtWidgets.QApplication(sys.argv)
    w = MainWindow()
    w.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
