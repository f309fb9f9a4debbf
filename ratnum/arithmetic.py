"""
Exact arithmetic over rationals.

Each function accepts anything :meth:`Rational.coerce` understands
(``Rational``, ``(num, den)`` pairs, ``"num/den"`` strings, ints) and returns
a canonical :class:`Rational`: positive denominator, coprime components, and
``0/1`` for zero. :func:`power_real` is the exception and returns a float.
"""
import logging
import math
import numbers

import numpy as np

from . import rational

module_logger = logging.getLogger(__name__)


__all__ = [
    "reduce",
    "add",
    "subtract",
    "multiply",
    "divide",
    "absolute_value",
    "power_rational",
    "power_real"
]


def reduce(a):
    """
    Reduce a rational number to its lowest terms.

    Raises:
        InvalidDenominatorError: if the denominator is zero and the
            numerator isn't.
    """
    nu, de = rational.Rational.coerce(a)
    if de < 0:
        nu, de = -nu, -de
    if nu == 0:
        return rational.Rational(0, 1)
    if de == 0:
        raise rational.InvalidDenominatorError(
            f"reduce: {nu}/{de} has a zero denominator")
    g = math.gcd(nu, de)
    return rational.Rational(nu // g, de // g)


def add(a, b):
    a_nu, a_de = rational.Rational.coerce(a)
    b_nu, b_de = rational.Rational.coerce(b)
    module_logger.debug(f"add: a={a_nu}/{a_de}, b={b_nu}/{b_de}")
    return reduce((a_nu*b_de + b_nu*a_de, a_de*b_de))


def subtract(a, b):
    a_nu, a_de = rational.Rational.coerce(a)
    b_nu, b_de = rational.Rational.coerce(b)
    module_logger.debug(f"subtract: a={a_nu}/{a_de}, b={b_nu}/{b_de}")
    return reduce((a_nu*b_de - b_nu*a_de, a_de*b_de))


def multiply(a, b):
    a_nu, a_de = rational.Rational.coerce(a)
    b_nu, b_de = rational.Rational.coerce(b)
    module_logger.debug(f"multiply: a={a_nu}/{a_de}, b={b_nu}/{b_de}")
    return reduce((a_nu*b_nu, a_de*b_de))


def divide(dividend, divisor):
    """
    Multiply `dividend` by the reciprocal of `divisor`.

    Raises:
        InvalidDenominatorError: if `divisor` is zero.
    """
    dividend_nu, dividend_de = rational.Rational.coerce(dividend)
    divisor_nu, divisor_de = rational.Rational.coerce(divisor)
    module_logger.debug((f"divide: dividend={dividend_nu}/{dividend_de}, "
                         f"divisor={divisor_nu}/{divisor_de}"))
    if divisor_nu == 0:
        raise rational.InvalidDenominatorError(
            f"divide: can't divide {dividend_nu}/{dividend_de} by zero")
    return reduce((dividend_nu*divisor_de, dividend_de*divisor_nu))


def absolute_value(a):
    nu, de = rational.Rational.coerce(a)
    return reduce((abs(nu), abs(de)))


def power_rational(a, n: int):
    """
    Raise a rational to an integer power. Any value to the power of zero
    is 1/1, zero included.

    Raises:
        InvalidDenominatorError: if `a` is zero and `n` is negative.
        TypeError: if `n` isn't an integer.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"power_rational: exponent {n!r} must be an int")
    nu, de = rational.Rational.coerce(a)
    n = int(n)
    module_logger.debug(f"power_rational: a={nu}/{de}, n={n}")
    if n == 0:
        return rational.Rational(1, 1)
    if n > 0:
        return reduce((nu**n, de**n))
    if nu == 0:
        raise rational.InvalidDenominatorError(
            f"power_rational: can't raise zero to negative power {n}")
    return reduce((de**-n, nu**-n))


def power_real(base, exponent) -> float:
    """
    Raise a real number to a rational power, in floating point.

    A negative base with a fractional exponent gives nan, and a zero base
    with a negative exponent gives inf; neither raises.
    """
    nu, de = rational.Rational.coerce(exponent)
    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        result = float(np.power(np.float64(base), nu / de))
    if not np.isfinite(result):
        module_logger.debug(
            f"power_real: {base}**({nu}/{de}) is not finite: {result}")
    return result
