__version__ = "0.1.0"

from . import util
from .rational import Rational, InvalidDenominatorError
from .arithmetic import (
    reduce,
    add,
    subtract,
    multiply,
    divide,
    absolute_value,
    power_rational,
    power_real
)

__all__ = [
    "util",
    "Rational",
    "InvalidDenominatorError",
    "reduce",
    "add",
    "subtract",
    "multiply",
    "divide",
    "absolute_value",
    "power_rational",
    "power_real"
]
