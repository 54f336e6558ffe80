"""
Simple 3D Vector class for turtle interpretation.
"""

import numpy as np


class Vector3D:
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __add__(self, other: 'Vector3D') -> 'Vector3D':
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'Vector3D') -> 'Vector3D':
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> 'Vector3D':
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> 'Vector3D':
        return Vector3D(self.x / scalar, self.y / scalar, self.z / scalar)

    def __repr__(self) -> str:
        return f"Vector3D({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return bool(np.allclose(self.to_array(), other.to_array()))

    __hash__ = None

    @property
    def magnitude(self) -> float:
        return float(np.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2))

    def normalize(self) -> 'Vector3D':
        mag = self.magnitude
        if mag < 1e-10:
            return Vector3D(0, 0, 0)
        return self / mag

    def dot(self, other: 'Vector3D') -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: 'Vector3D') -> 'Vector3D':
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def rotate_about(self, axis: 'Vector3D', angle: float) -> 'Vector3D':
        """
        Rotate around a unit axis by angle (radians, right-handed).

        Rodrigues' formula; gives the same result as an axis-angle quaternion
        up to floating point rounding.
        """
        k = axis.normalize()
        cos_a = np.cos(angle)
        sin_a = np.sin(angle)
        return (self * cos_a
                + k.cross(self) * sin_a
                + k * (k.dot(self) * (1.0 - cos_a)))

    def rounded(self, ndigits: int = 6) -> tuple:
        # + 0.0 folds -0.0 into 0.0
        return tuple(round(c, ndigits) + 0.0 for c in (self.x, self.y, self.z))

    def to_tuple(self) -> tuple:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    def copy(self) -> 'Vector3D':
        return Vector3D(self.x, self.y, self.z)


ORIGIN = Vector3D(0.0, 0.0, 0.0)
UP = Vector3D(0.0, 1.0, 0.0)
Z_AXIS = Vector3D(0.0, 0.0, 1.0)
X_AXIS = Vector3D(1.0, 0.0, 0.0)
