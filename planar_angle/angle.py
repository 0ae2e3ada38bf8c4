"""
Planar angle value type.

An Angle stores a single radian measure normalized to the canonical
range (-pi, pi]. Every constructor and every arithmetic operation
normalizes its result, so chains of additions and subtractions never
drift outside the range.
"""

import math

Radians = float
Degrees = float

TWO_PI = 2.0 * math.pi
RADIANS_90_DEGREES = math.pi / 2.0


def _normalize(value):
    if math.isinf(value):
        # math.fmod raises on infinities instead of returning NaN
        return math.nan

    # fmod keeps the sign of value; +pi is kept, -pi becomes +pi
    value = math.fmod(value, TWO_PI)

    if value > math.pi:
        value -= TWO_PI
    elif value <= -math.pi:
        value += TWO_PI

    return value


class Angle:
    """
    Planar angle normalized to (-pi, pi].

    Instances are immutable. Build them with ``Angle.radians`` or
    ``Angle.degrees`` (or the module-level ``radians`` / ``degrees``).

    NaN input produces a NaN angle which compares unequal to everything,
    itself included. Infinite input also yields NaN.

    Examples
    --------
    >>> a = Angle.degrees(90) + Angle.degrees(180)
    >>> a.is_within(Angle.degrees(-90), Angle.degrees(0.001))
    True
    >>> str(Angle.radians(0.0))
    '0deg'
    """

    __slots__ = ('_value',)

    def __init__(self, value=0.0):
        object.__setattr__(self, '_value', _normalize(float(value)))

    @classmethod
    def radians(cls, value):
        """Create an angle from a measure in radians."""
        return cls(value)

    @classmethod
    def degrees(cls, value):
        """Create an angle from a measure in degrees."""
        return cls(value * math.pi / 180.0)

    @classmethod
    def _wrap(cls, value):
        # caller guarantees value is already canonical
        angle = cls.__new__(cls)
        object.__setattr__(angle, '_value', value)
        return angle

    @property
    def value(self):
        """Normalized measure in radians."""
        return self._value

    def as_radians(self):
        return self._value

    def as_degrees(self):
        return self._value * 180.0 / math.pi

    def abs(self):
        """
        Absolute value of the angle.

        The result lies in [0, pi], inside the canonical range, so it is
        not normalized again.
        """
        return self._wrap(math.fabs(self._value))

    def cos(self):
        return math.cos(self._value)

    def sin(self):
        return math.sin(self._value)

    def is_within(self, other, difference):
        """
        Check whether two angles are closer than a tolerance.

        The separation is measured along the shortest path around the
        circle, so 179 deg and -179 deg are 2 deg apart.

        Parameters
        ----------
        other : Angle
            Angle to compare against
        difference : Angle
            Tolerance. It is an Angle and therefore normalized: a
            tolerance of 400 deg behaves like 40 deg.

        Returns
        -------
        bool
            True if the separation is strictly less than the tolerance.
            A zero or negative tolerance is never satisfied.
        """
        if not isinstance(other, Angle) or not isinstance(difference, Angle):
            raise TypeError(
                f"is_within expects Angle arguments, got "
                f"{type(other).__name__} and {type(difference).__name__}"
            )
        return (self - other).abs().as_radians() < difference.as_radians()

    def __add__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self._value + other._value)

    def __sub__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self._value - other._value)

    def __neg__(self):
        return Angle(-self._value)

    def __abs__(self):
        return self.abs()

    def __float__(self):
        return self._value

    def __eq__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(self._value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Angle, (self._value,))

    def __repr__(self):
        return f"Angle.radians({self._value!r})"

    def __str__(self):
        text = repr(self.as_degrees())
        if text.endswith('.0'):
            text = text[:-2]
        return f"{text}deg"


def radians(value):
    """Create an Angle from radians."""
    return Angle.radians(value)


def degrees(value):
    """Create an Angle from degrees."""
    return Angle.degrees(value)


def add(a, b):
    """Normalized sum of two angles, same as ``a + b``."""
    return a + b


def subtract(a, b):
    """Normalized difference of two angles, same as ``a - b``."""
    return a - b
