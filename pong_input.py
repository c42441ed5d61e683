from pong_logic import PADDLE_SPEED

UP = "up"
DOWN = "down"

KEY_ALIASES = {
    "up": UP,
    "w": UP,
    "down": DOWN,
    "s": DOWN,
}

def key_direction(name):
    if not name:
        return None
    return KEY_ALIASES.get(name.lower())

class InputState:
    """Control state of the left paddle, written by event handlers between frames.

    Handlers only assign fields here; `pong_logic.step` samples it once per frame.
    """

    def __init__(self):
        self.held = {UP: False, DOWN: False}
        self.pointer_y = None

    @property
    def keyboard_active(self):
        return self.held[UP] or self.held[DOWN]

    def pointer_move(self, y):
        self.pointer_y = y

    def take_pointer(self):
        y = self.pointer_y
        self.pointer_y = None
        return y

    def press(self, direction):
        if direction not in self.held:
            raise ValueError(f"unknown direction {direction!r}")
        self.held[direction] = True

    def release(self, direction):
        if direction not in self.held:
            raise ValueError(f"unknown direction {direction!r}")
        self.held[direction] = False

    def keyboard_velocity(self):
        v = 0
        if self.held[UP]:
            v -= PADDLE_SPEED
        if self.held[DOWN]:
            v += PADDLE_SPEED
        return v

    def clear(self):
        self.held = {UP: False, DOWN: False}
        self.pointer_y = None
