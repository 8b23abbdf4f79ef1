# core/vector.py
import math
import numbers
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector3:
    """
    An immutable 3D vector, used both as a point and as a direction.
    Every operation returns a new Vector3.
    """
    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def infinity(cls) -> "Vector3":
        """
        Sentinel point for "no intersection": infinitely far along every axis.
        """
        return cls(math.inf, math.inf, math.inf)

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scaled(self, k: float) -> "Vector3":
        return Vector3(self.x * k, self.y * k, self.z * k)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def unit(self) -> "Vector3":
        """
        Returns the vector scaled to length 1.

        Raises:
            ValueError: If the vector has zero magnitude.
        """
        m = self.magnitude()
        if m == 0:
            raise ValueError("Cannot normalize a zero-magnitude vector")
        return Vector3(self.x / m, self.y / m, self.z / m)

    def __add__(self, other: "Vector3") -> "Vector3":
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return self.sub(other)

    def __mul__(self, k: float) -> "Vector3":
        if isinstance(k, numbers.Real):
            return self.scaled(k)
        return NotImplemented

    def __rmul__(self, k: float) -> "Vector3":
        return self.__mul__(k)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
