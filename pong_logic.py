import random

FIELD_WIDTH = 800
FIELD_HEIGHT = 400
PADDLE_WIDTH = 10
PADDLE_HEIGHT = 80
PADDLE_MARGIN = 10
BALL_SIZE = 12

PADDLE_SPEED = 5
AI_SPEED = 3
BALL_SPEED = 5

WIN_SCORE = 5
DEADBAND = 10
SPIN = 0.2

LEFT = "left"
RIGHT = "right"

def limit(v, a, b):
    return max(a, min(b, v))

class Paddle:
    def __init__(self, x, y, width=PADDLE_WIDTH, height=PADDLE_HEIGHT):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @property
    def center_y(self):
        return self.y + self.height / 2

    def clamp(self, surface_height):
        # paddle taller than the field sticks to the top
        self.y = limit(self.y, 0, max(0, surface_height - self.height))

class Ball:
    def __init__(self, x, y, size=BALL_SIZE, vx=0.0, vy=0.0):
        self.x = x
        self.y = y
        self.size = size
        self.vx = vx
        self.vy = vy

    @property
    def center_y(self):
        return self.y + self.size / 2

    def overlaps_rows(self, paddle):
        return self.y + self.size >= paddle.y and self.y <= paddle.y + paddle.height

class GameState:
    def __init__(self, width=FIELD_WIDTH, height=FIELD_HEIGHT, rng=None):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()

        start_y = height / 2 - PADDLE_HEIGHT / 2
        self.left = Paddle(PADDLE_MARGIN, start_y)
        self.right = Paddle(width - PADDLE_WIDTH - PADDLE_MARGIN, start_y)
        self.left.clamp(height)
        self.right.clamp(height)

        self.ball = Ball(0, 0)
        self.scores = [0, 0]
        self.win_score = WIN_SCORE
        self.over = False
        self.winner = None

        self.serves = 0
        self.reset_ball()

    def reset_ball(self):
        self.ball.x = self.width / 2 - self.ball.size / 2
        self.ball.y = self.height / 2 - self.ball.size / 2
        self.ball.vx = BALL_SPEED * (1 if self.rng.random() > 0.5 else -1)
        self.ball.vy = BALL_SPEED * (self.rng.random() * 2 - 1)
        self.serves += 1

    def add_point(self, side):
        """Count a point for `side`, return the events it produced."""
        self.scores[0 if side == LEFT else 1] += 1
        events = [("score", side)]

        if self.scores[0] >= self.win_score:
            self.over = True
            self.winner = LEFT
        elif self.scores[1] >= self.win_score:
            self.over = True
            self.winner = RIGHT
        if self.over:
            events.append(("over", self.winner))

        self.reset_ball()
        return events

def move_left_paddle(state, inputs):
    paddle = state.left
    if inputs.keyboard_active:
        inputs.take_pointer()
        paddle.y += inputs.keyboard_velocity()
    else:
        pointer_y = inputs.take_pointer()
        if pointer_y is None:
            return
        paddle.y = pointer_y - paddle.height / 2
    paddle.clamp(state.height)

def bounce_walls(state):
    ball = state.ball
    if ball.y <= 0 or ball.y + ball.size >= state.height:
        ball.vy = -ball.vy
        ball.y = limit(ball.y, 0, state.height - ball.size)

def hit_paddle(ball, paddle, direction):
    ball.vx = direction * abs(ball.vx)
    ball.vy = (ball.center_y - paddle.center_y) * SPIN

def bounce_paddles(state):
    ball = state.ball
    left, right = state.left, state.right

    # both may fire on a very narrow field, right one is applied last
    if ball.x <= left.x + left.width and ball.overlaps_rows(left):
        hit_paddle(ball, left, 1)
    if ball.x + ball.size >= right.x and ball.overlaps_rows(right):
        hit_paddle(ball, right, -1)

def move_opponent(state):
    paddle = state.right
    target = state.ball.center_y
    center = paddle.center_y

    if center < target - DEADBAND:
        paddle.y += AI_SPEED
    elif center > target + DEADBAND:
        paddle.y -= AI_SPEED
    paddle.clamp(state.height)

def step(state, inputs):
    """Advance the game by one frame.

    Returns a list of ("score", side) and ("over", side) events in the order
    they happened. Does nothing once the game is over.
    """
    if state.over:
        return []

    move_left_paddle(state, inputs)

    ball = state.ball
    ball.x += ball.vx
    ball.y += ball.vy

    bounce_walls(state)
    bounce_paddles(state)

    events = []
    if ball.x < 0:
        events += state.add_point(RIGHT)
    if not state.over and ball.x + ball.size > state.width:
        events += state.add_point(LEFT)

    if not state.over:
        move_opponent(state)
    return events
