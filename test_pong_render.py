import random
import unittest

from pong_logic import GameState
from pong_render import FOREGROUND, NET_COLOR, NET_DASH, render

class RecordingSurface:
    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, color))

    def fill_circle(self, cx, cy, r, color):
        self.calls.append(("circle", cx, cy, r, color))

    def stroke_line(self, x1, y1, x2, y2, color, dash=None):
        self.calls.append(("line", x1, y1, x2, y2, color, dash))

def snapshot(st):
    b = st.ball
    return (b.x, b.y, b.vx, b.vy, st.left.y, st.right.y, list(st.scores), st.over)

class TestRender(unittest.TestCase):
    def setUp(self):
        self.st = GameState(rng=random.Random(3))
        self.surface = RecordingSurface()

    def test_scene(self):
        st = self.st
        st.ball.x, st.ball.y = 100, 50
        render(st, self.surface)

        self.assertEqual(self.surface.calls, [
            ("clear",),
            ("line", 400, 0, 400, 400, NET_COLOR, NET_DASH),
            ("rect", st.left.x, st.left.y, st.left.width, st.left.height, FOREGROUND),
            ("rect", st.right.x, st.right.y, st.right.width, st.right.height, FOREGROUND),
            ("circle", 106, 56, 6, FOREGROUND),
        ])

    def test_render_reads_only(self):
        before = snapshot(self.st)
        render(self.st, self.surface)
        render(self.st, self.surface)
        self.assertEqual(snapshot(self.st), before)

    def test_game_over_still_renders(self):
        self.st.over = True
        self.st.winner = "left"
        render(self.st, self.surface)
        self.assertEqual(self.surface.calls[0], ("clear",))
        self.assertEqual(len(self.surface.calls), 5)

if __name__ == "__main__":
    unittest.main()
