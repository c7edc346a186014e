from backend.engine.gamegenerator.generator import MAX_SIZE, MIN_SIZE, GameGenerator

__all__ = ["GameGenerator", "MAX_SIZE", "MIN_SIZE"]
