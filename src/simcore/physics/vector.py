"""Defines the :class:`.Vec3` class for positions, velocities & forces.

Components are plain floats so single vectors stay cheap to build and mutate inside tight
propagation loops. Use :meth:`.Vec3.asArray` and :meth:`.Vec3.fromArray` to move to and from
`numpy`_ when vectorized math is needed.

.. _numpy: https://numpy.org/doc/stable/
"""

from __future__ import annotations

# Third Party Imports
from numpy import array, asarray, errstate, ndarray, sqrt

# Local Imports
from ..common.exceptions import ShapeError
from ..common.logger import simcoreLogError


def _divide(vector: Vec3, scalar: float) -> tuple[float, float, float]:
    """Divide each component using IEEE-754 rules, so dividing by zero gives ``inf``/``nan``."""
    with errstate(divide="ignore", invalid="ignore"):
        x, y, z = array([vector.x, vector.y, vector.z], dtype=float) / scalar
    return float(x), float(y), float(z)


class Vec3:
    """Three component real vector.

    Arithmetic operators return new vectors; the augmented assignment operators mutate the
    left-hand vector in place. Nothing is validated: non-finite components simply propagate.
    """

    __slots__ = ("x", "y", "z")

    # Make `numpy` scalars defer to `Vec3.__rmul__`
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        """Construct a :class:`.Vec3`, the zero vector by default."""
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def fromArray(cls, vector: ndarray) -> Vec3:
        """Build a :class:`.Vec3` from a 3-element array.

        Args:
            vector (``ndarray``): 3x1 array of components

        Raises:
            :class:`.ShapeError`: `vector` doesn't hold exactly three elements.
        """
        vector = asarray(vector, dtype=float)
        if vector.size != 3:
            msg = f"`Vec3.fromArray()` expects 3 elements, got shape {vector.shape}"
            simcoreLogError(msg)
            raise ShapeError(msg)

        x, y, z = vector.ravel()
        return cls(x, y, z)

    def asArray(self) -> ndarray:
        """``ndarray``: 3x1 array copy of the components."""
        return array([self.x, self.y, self.z])

    def __add__(self, other):
        """."""
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        """."""
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar):
        """."""
        if isinstance(scalar, Vec3):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar):
        """."""
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        """."""
        if isinstance(scalar, Vec3):
            return NotImplemented
        return Vec3(*_divide(self, scalar))

    def __iadd__(self, other):
        """."""
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other):
        """."""
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, scalar):
        """."""
        if isinstance(scalar, Vec3):
            return NotImplemented
        self.x = float(self.x * scalar)
        self.y = float(self.y * scalar)
        self.z = float(self.z * scalar)
        return self

    def __itruediv__(self, scalar):
        """."""
        if isinstance(scalar, Vec3):
            return NotImplemented
        self.x, self.y, self.z = _divide(self, scalar)
        return self

    def norm(self) -> float:
        """``float``: Euclidean length of the vector."""
        return float(sqrt(self.normSquared()))

    def normSquared(self) -> float:
        """``float``: squared Euclidean length, cheaper when only relative magnitude matters."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vec3:
        """Return the unit vector along this one.

        A vector whose norm isn't strictly positive normalizes to the zero vector instead of
        dividing by zero.
        """
        magnitude = self.norm()
        return self / magnitude if magnitude > 0.0 else Vec3()

    @staticmethod
    def dot(a: Vec3, b: Vec3) -> float:
        """``float``: dot product of `a` and `b`."""
        return a.x * b.x + a.y * b.y + a.z * b.z

    @staticmethod
    def cross(a: Vec3, b: Vec3) -> Vec3:
        """Right-handed cross product, `a` x `b`."""
        return Vec3(
            a.y * b.z - a.z * b.y,
            a.z * b.x - a.x * b.z,
            a.x * b.y - a.y * b.x,
        )

    def __eq__(self, other):
        """Component-wise exact equality."""
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __iter__(self):
        """Iterate over the components, allowing ``x, y, z = vector``."""
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self):
        """Return a string representation of this :class:`.Vec3`."""
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"

    def __str__(self):
        """Return the components in list form, e.g. ``[1.0, 2.0, 3.0]``."""
        return f"[{self.x}, {self.y}, {self.z}]"
