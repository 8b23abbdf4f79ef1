# core/ray.py
from core.vector import Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin `o` and direction `dir`.
    """
    def __init__(self, origin: Vector3, direction: Vector3):
        self.o = origin
        self.dir = direction

    @classmethod
    def from_origin(cls, direction: Vector3) -> "Ray":
        """
        Builds a ray leaving the world origin.
        """
        return cls(Vector3.zero(), direction)

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.o + self.dir * t

    def reflected(self, axis: "Ray") -> "Ray":
        """
        Mirrors this ray's direction about `axis.dir` (d' = d - 2(d.n)n).

        The new ray starts at `axis.o + axis.dir`. `axis.dir` should be
        normalized; no normalization happens here.
        """
        proj = axis.dir.scaled(self.dir.dot(axis.dir))
        return Ray(axis.o + axis.dir, self.dir - proj.scaled(2))

    def __repr__(self) -> str:
        return f"Ray({self.o!r}, {self.dir!r})"
