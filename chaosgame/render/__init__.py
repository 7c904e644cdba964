from .canvas import Canvas
from .screen import ScreenRenderer

__all__ = ["Canvas", "ScreenRenderer"]
