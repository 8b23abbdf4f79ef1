from geometry.renderable import Renderable
from geometry.sphere import Sphere

__all__ = ["Renderable", "Sphere"]
