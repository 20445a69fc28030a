from slidesolver.engine.generator.generator import GameGenerator

__all__ = ["GameGenerator"]
