import logging
import typing

import numpy as np

from .rational import Rational, InvalidDenominatorError

module_logger = logging.getLogger(__name__)


__all__ = [
    "rational_type",
    "reduce_array",
    "to_arrays",
    "from_arrays"
]


rational_type = typing.Union[str, int, typing.Tuple[int, int], Rational]


def reduce_array(
    numerators: typing.Any,
    denominators: typing.Any
) -> typing.Tuple[np.ndarray, np.ndarray]:
    """
    Reduce many fractions at once. Same rules as
    :func:`ratnum.arithmetic.reduce`, applied element-wise.

    Components are held as int64, so unlike :func:`ratnum.arithmetic.reduce`
    this is only exact for values within the int64 range; negating
    ``-2**63`` wraps around silently.

    Args:
        numerators (array_like): integer numerators
        denominators (array_like): integer denominators, broadcastable
            against `numerators`
    Returns:
        tuple: (numerators, denominators) as int64 arrays
    Raises:
        InvalidDenominatorError: if any entry has a zero denominator and a
            nonzero numerator.
    """
    nu, de = np.broadcast_arrays(
        np.asarray(numerators, dtype=np.int64),
        np.asarray(denominators, dtype=np.int64))
    module_logger.debug(f"reduce_array: nu.shape={nu.shape}")

    invalid = (de == 0) & (nu != 0)
    if np.any(invalid):
        raise InvalidDenominatorError(
            (f"reduce_array: {np.count_nonzero(invalid)} entries "
             f"have a zero denominator"))

    sign = np.where(de < 0, -1, 1)
    nu = nu * sign
    de = de * sign

    zero = nu == 0
    g = np.where(zero, 1, np.gcd(nu, de))
    nu = np.where(zero, 0, nu // g)
    de = np.where(zero, 1, de // g)
    return nu, de


def to_arrays(
    rationals: typing.Iterable[rational_type]
) -> typing.Tuple[np.ndarray, np.ndarray]:
    """
    Split rationals into parallel numerator and denominator arrays.
    No reduction is done.
    """
    pairs = [tuple(Rational.coerce(r)) for r in rationals]
    if not pairs:
        return np.zeros(0, dtype=np.int64), np.zeros(0, dtype=np.int64)
    nu, de = zip(*pairs)
    return np.asarray(nu, dtype=np.int64), np.asarray(de, dtype=np.int64)


def from_arrays(
    numerators: typing.Any,
    denominators: typing.Any
) -> typing.List[Rational]:
    nu, de = reduce_array(numerators, denominators)
    return [Rational(n, d) for n, d in zip(nu.ravel(), de.ravel())]
