from __future__ import annotations

# Third Party Imports
import pytest
from numpy import allclose, array, float64, isinf, isnan, zeros

# SIMCORE Imports
from simcore.common.exceptions import ShapeError
from simcore.physics.vector import Vec3


@pytest.fixture(name="vec_a")
def getVectorA() -> Vec3:
    """Create the (1, 2, 3) vector."""
    return Vec3(1, 2, 3)


@pytest.fixture(name="vec_b")
def getVectorB() -> Vec3:
    """Create the (4, 5, 6) vector."""
    return Vec3(4, 5, 6)


def testDefault():
    """Test the default vector is the zero vector."""
    assert Vec3() == Vec3(0.0, 0.0, 0.0)


def testAddSubtract(vec_a: Vec3, vec_b: Vec3):
    """Test component-wise addition and subtraction."""
    added = vec_a + vec_b
    assert (added.x, added.y, added.z) == (5, 7, 9)
    assert vec_b - vec_a == Vec3(3, 3, 3)
    assert vec_a - vec_b == Vec3(-3, -3, -3)
    # Operands are untouched
    assert vec_a == Vec3(1, 2, 3)


def testScalar(vec_a: Vec3):
    """Test scalar multiplication from either side, and division."""
    assert vec_a * 2 == Vec3(2, 4, 6)
    assert 2 * vec_a == Vec3(2, 4, 6)
    assert float64(2.0) * vec_a == Vec3(2, 4, 6)
    assert vec_a / 2 == Vec3(0.5, 1.0, 1.5)


def testDivideByZero():
    """Test dividing by zero follows IEEE-754 rather than raising."""
    result = Vec3(1, -1, 0) / 0.0
    assert isinf(result.x)
    assert result.x > 0
    assert isinf(result.y)
    assert result.y < 0
    assert isnan(result.z)


def testInPlace(vec_a: Vec3, vec_b: Vec3):
    """Test augmented assignment mutates and returns the same object."""
    vector = vec_a
    vector += vec_b
    assert vector is vec_a
    assert vec_a == Vec3(5, 7, 9)

    vector -= vec_b
    assert vector is vec_a
    assert vec_a == Vec3(1, 2, 3)

    vector *= 3
    assert vector is vec_a
    assert vec_a == Vec3(3, 6, 9)

    vector /= 3
    assert vector is vec_a
    assert vec_a == Vec3(1, 2, 3)

    # Right-hand side is untouched
    assert vec_b == Vec3(4, 5, 6)


def testNorms():
    """Test the norm & squared norm."""
    vector = Vec3(3, 4, 0)
    assert vector.norm() == 5.0
    assert vector.normSquared() == 25.0
    assert Vec3(1, 2, 3).normSquared() == 14.0


def testNormalized():
    """Test normalizing gives a unit vector along the original."""
    unit = Vec3(3, 4, 0).normalized()
    assert unit == Vec3(0.6, 0.8, 0.0)
    assert unit.norm() == pytest.approx(1.0)


def testNormalizedZero():
    """Test normalizing the zero vector returns the zero vector without raising."""
    zero = Vec3(0, 0, 0)
    assert zero.normalized() == Vec3(0, 0, 0)
    assert zero.normalized() is not zero


def testNonFinite():
    """Test non-finite components propagate without validation."""
    vector = Vec3(float("inf"), 1, 2) + Vec3(1, 1, 1)
    assert isinf(vector.x)
    assert isinf(vector.norm())
    assert isnan(Vec3(float("nan"), 0, 0).normSquared())


def testDot(vec_a: Vec3, vec_b: Vec3):
    """Test the dot product."""
    assert Vec3.dot(vec_a, vec_b) == 32
    assert Vec3.dot(Vec3(1, 0, 0), Vec3(0, 1, 0)) == 0


def testCross(vec_a: Vec3, vec_b: Vec3):
    """Test the right-handed cross product."""
    cross = Vec3.cross(vec_a, vec_b)
    assert (cross.x, cross.y, cross.z) == (-3, 6, -3)
    assert Vec3.cross(vec_b, vec_a) == Vec3(3, -6, 3)
    assert Vec3.cross(Vec3(1, 0, 0), Vec3(0, 1, 0)) == Vec3(0, 0, 1)
    assert Vec3.dot(cross, vec_a) == 0
    assert Vec3.dot(cross, vec_b) == 0


def testArrays(vec_a: Vec3):
    """Test conversion to and from `numpy` arrays."""
    assert allclose(vec_a.asArray(), [1.0, 2.0, 3.0])
    assert Vec3.fromArray(array([1, 2, 3])) == vec_a
    assert Vec3.fromArray(array([[1], [2], [3]])) == vec_a

    with pytest.raises(ShapeError):
        Vec3.fromArray(zeros(4))


def testUnpackAndPrint(vec_a: Vec3):
    """Test unpacking and string representations."""
    x, y, z = vec_a
    assert (x, y, z) == (1.0, 2.0, 3.0)
    assert str(vec_a) == "[1.0, 2.0, 3.0]"
    assert repr(vec_a) == "Vec3(1.0, 2.0, 3.0)"


def testUnsupportedOperands(vec_a: Vec3):
    """Test vector-by-vector products aren't silently accepted."""
    with pytest.raises(TypeError):
        vec_a * vec_a

    with pytest.raises(TypeError):
        vec_a + 1.0
