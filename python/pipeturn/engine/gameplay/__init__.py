from pipeturn.engine.gameplay.game import Game
from pipeturn.engine.gameplay.session import LevelSession

__all__ = ["Game", "LevelSession"]
