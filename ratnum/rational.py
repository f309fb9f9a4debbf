import numbers
import typing

from . import arithmetic

__all__ = [
    "Rational",
    "InvalidDenominatorError"
]


class InvalidDenominatorError(ZeroDivisionError):
    """
    Raised when an operation would produce a rational with a zero
    denominator.
    """


class Rational:
    """
    An immutable numerator/denominator pair.

    Construction does not reduce; every function in
    :mod:`ratnum.arithmetic` returns a canonical value. Equality is
    structural, so ``Rational(2, 4) != Rational(1, 2)``.
    """

    def __init__(self, numerator, denominator=1):
        self._numerator = int(numerator)
        self._denominator = int(denominator)

    def __float__(self):
        return self._numerator / self._denominator

    def __int__(self):
        # truncate toward zero without going through float
        q = abs(self._numerator) // abs(self._denominator)
        if (self._numerator < 0) != (self._denominator < 0):
            return -q
        return q

    def __str__(self):
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self):
        return f"Rational({self.numerator}, {self.denominator})"

    def __iter__(self):
        yield self._numerator
        yield self._denominator

    def __eq__(self, other):
        if isinstance(other, Rational):
            return tuple(self) == tuple(other)
        if isinstance(other, tuple):
            return tuple(self) == other
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self))

    def __add__(self, other):
        if not _is_rational_like(other):
            return NotImplemented
        return arithmetic.add(self, other)

    def __radd__(self, other):
        if not _is_rational_like(other):
            return NotImplemented
        return arithmetic.add(other, self)

    def __sub__(self, other):
        if not _is_rational_like(other):
            return NotImplemented
        return arithmetic.subtract(self, other)

    def __rsub__(self, other):
        if not _is_rational_like(other):
            return NotImplemented
        return arithmetic.subtract(other, self)

    def __mul__(self, other):
        if not _is_rational_like(other):
            return NotImplemented
        return arithmetic.multiply(self, other)

    def __rmul__(self, other):
        if not _is_rational_like(other):
            return NotImplemented
        return arithmetic.multiply(other, self)

    def __truediv__(self, other):
        if not _is_rational_like(other):
            return NotImplemented
        return arithmetic.divide(self, other)

    def __rtruediv__(self, other):
        if not _is_rational_like(other):
            return NotImplemented
        return arithmetic.divide(other, self)

    def __neg__(self):
        return arithmetic.reduce((-self._numerator, self._denominator))

    def __abs__(self):
        return arithmetic.absolute_value(self)

    def __pow__(self, n):
        if not isinstance(n, numbers.Integral):
            return NotImplemented
        return arithmetic.power_rational(self, n)

    def __rpow__(self, base):
        if isinstance(base, bool) or not isinstance(base, numbers.Real):
            return NotImplemented
        return arithmetic.power_real(base, self)

    @property
    def numerator(self):
        return self._numerator

    @property
    def nu(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    @property
    def de(self):
        return self._denominator

    @classmethod
    def from_str(cls, rational_str: typing.Any, delimiter: str = "/"):
        """
        Return a new instance of Rational if `rational_str` is a str.
        If `rational_str` is already a Rational object, just return that.

        Args:
            rational_str (str/Rational)
            delimiter (str)
        Returns:
            Rational
        """
        if isinstance(rational_str, str):
            parts = rational_str.strip().split(delimiter)
            if len(parts) > 2 or not all(p.strip() for p in parts):
                raise ValueError(
                    f"Couldn't parse {rational_str!r} as a rational")
            return cls(*(int(p) for p in parts))
        elif isinstance(rational_str, cls):
            return rational_str
        else:
            raise RuntimeError(
                (f"Couldn't identify {rational_str} "
                 f"of type {type(rational_str)}"))

    @classmethod
    def coerce(cls, obj: typing.Any, delimiter: str = "/"):
        """
        Like `from_str`, but also accepts ints and (numerator, denominator)
        pairs.

        Raises:
            TypeError: if a pair has a non-integer component.
        """
        if isinstance(obj, (tuple, list)) and len(obj) == 2:
            if not all(_is_integer(n) for n in obj):
                raise TypeError(
                    f"Couldn't use {obj} as a rational: expected ints")
            return cls(*obj)
        if _is_integer(obj):
            return cls(obj, 1)
        return cls.from_str(obj, delimiter=delimiter)


def _is_integer(obj) -> bool:
    return isinstance(obj, numbers.Integral) and not isinstance(obj, bool)


def _is_rational_like(obj) -> bool:
    if isinstance(obj, (Rational, str)) or _is_integer(obj):
        return True
    return (isinstance(obj, (tuple, list)) and len(obj) == 2 and
            all(_is_integer(n) for n in obj))
