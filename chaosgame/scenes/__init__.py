from .base import Scene
from .chaos_scene import ChaosScene

__all__ = ["Scene", "ChaosScene"]
