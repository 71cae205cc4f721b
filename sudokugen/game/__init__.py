from sudokugen.game.session import GameContext, GameSession

__all__ = ["GameContext", "GameSession"]
