from reversi.commands.play import print_summary
from reversi.othello.game import Game
from reversi.othello.rules import InvalidMove


class Replay:
    def __init__(self, transcript: str, auto_pass: bool) -> None:
        self.transcript = transcript
        self.auto_pass = auto_pass

    def __call__(self) -> bool:
        try:
            game = Game.from_transcript(self.transcript, auto_pass=self.auto_pass)
        except (InvalidMove, ValueError) as e:
            print(f"Could not replay moves: {e}")
            return False

        print_summary(game.state)
        return True
