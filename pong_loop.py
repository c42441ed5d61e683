from pong_input import InputState
from pong_logic import GameState, step

class GameLoop:
    """Drives one game: step the rules, report scores and the winner, then draw.

    `draw(state)` is called after every tick, `on_score(left, right)` after
    every point and `on_game_over(winner)` once when a side reaches the win score.
    """

    def __init__(self, state=None, draw=None, on_score=None, on_game_over=None):
        self.state = state if state is not None else GameState()
        self.inputs = InputState()
        self.draw = draw
        self.on_score = on_score
        self.on_game_over = on_game_over
        self.frames = 0

        print(f"[pong core] game start # first to {self.state.win_score}")
        self.push_score()

    def push_score(self):
        if self.on_score:
            self.on_score(*self.state.scores)

    def tick(self):
        events = step(self.state, self.inputs)
        if not self.state.over:
            self.frames += 1

        for kind, side in events:
            if kind == "score":
                left, right = self.state.scores
                print(f"[pong core] point {side} # {left}:{right}")
                self.push_score()
            elif kind == "over":
                print(f"[pong core] game over # winner {side}")
                if self.on_game_over:
                    self.on_game_over(side)

        if self.draw:
            self.draw(self.state)
        return events

    def run(self, frames):
        """Tick at most `frames` times, stopping once the game is over."""
        for _ in range(frames):
            if self.state.over:
                break
            self.tick()
        return self.state

    def restart(self):
        old = self.state
        self.state = GameState(old.width, old.height, old.rng)
        self.inputs.clear()
        self.frames = 0
        print("[pong core] restart")
        self.push_score()
        if self.draw:
            self.draw(self.state)
