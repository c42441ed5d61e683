BACKGROUND = (0, 0, 0)
FOREGROUND = (255, 255, 255)
NET_COLOR = (85, 85, 85)
NET_DASH = (6, 10)

def render(state, surface):
    """Repaint the whole field on `surface`.

    The surface needs clear(), fill_rect(x, y, w, h, color),
    fill_circle(cx, cy, r, color) and stroke_line(x1, y1, x2, y2, color, dash).
    Reads the state only.
    """
    surface.clear()

    mid = state.width / 2
    surface.stroke_line(mid, 0, mid, state.height, NET_COLOR, NET_DASH)

    for p in (state.left, state.right):
        surface.fill_rect(p.x, p.y, p.width, p.height, FOREGROUND)

    b = state.ball
    r = b.size / 2
    surface.fill_circle(b.x + r, b.y + r, r, FOREGROUND)
