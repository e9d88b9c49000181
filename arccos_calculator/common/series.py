"""Taylor-series evaluation of arcsin and arccos."""
import math
from typing import Optional

from arccos_calculator.common.errors import FactorialOverflowError, OutOfRangeError
from arccos_calculator.common.models import SeriesSettings


PI: float = 3.141592653589793

DEFAULT_SETTINGS = SeriesSettings()


class ArccosEngine:
    """
    Compute arccos(x) from a truncated Maclaurin series of arcsin.

    Design constraints:
        - No call into math.acos / math.asin, the series does all the work
        - Pure and stateless, every call depends on its arguments only

    Algorithm:
        arccos(x) = pi/2 - arcsin(x), with

        arcsin(x) = sum_{n>=0} (2n)! / (4^n * (n!)^2 * (2n+1)) * x^(2n+1)

    Each coefficient is rebuilt from factorial() and power() on every
    iteration. With the default settings the denominator overflows to +inf at
    n = 85, which turns the term into 0.0 and ends the loop, so the series is
    never longer than 85 terms. Accuracy therefore degrades as |x| approaches 1.
    """

    @staticmethod
    def factorial(n: int) -> float:
        """
        Compute n! by iterative floating-point multiplication.

        :param int n: Non-negative integer

        :return: n! as a float
        :rtype: float
        :raises FactorialOverflowError: If the product becomes infinite
        """
        result = 1.0
        for i in range(2, n + 1):
            result *= i
            if math.isinf(result):
                raise FactorialOverflowError("Factorial overflow during calculation.")
        return result

    @staticmethod
    def power(base: float, exponent: int) -> float:
        """
        Compute base ** exponent by repeated multiplication.

        :param float base: Base value
        :param int exponent: Non-negative exponent

        :return: base raised to exponent
        :rtype: float
        """
        result = 1.0
        for _ in range(exponent):
            result *= base
        return result

    @staticmethod
    def to_degrees(radians: float) -> float:
        """Convert an angle from radians to degrees."""
        return radians * 180.0 / PI

    @staticmethod
    def compute_arcsin(x: float, settings: Optional[SeriesSettings] = None) -> float:
        """
        Sum the arcsin Taylor series at x.

        The running sum starts at x (the n = 0 term) and stops after the first
        term whose magnitude falls below the tolerance, or when n reaches
        max_terms.

        :param float x: Value in [-1, 1]
        :param SeriesSettings settings: Series cutoffs, defaults to the contract values

        :return: Approximation of arcsin(x)
        :rtype: float
        :raises FactorialOverflowError: If a coefficient cannot be computed
        """
        settings = settings or DEFAULT_SETTINGS

        total = x
        power_of_x = x

        for n in range(1, settings.max_terms):
            # x^(2n-1) -> x^(2n+1)
            power_of_x *= x * x

            numerator = ArccosEngine.factorial(2 * n)
            denominator = (
                ArccosEngine.power(4.0, n)
                * ArccosEngine.power(ArccosEngine.factorial(n), 2)
                * (2 * n + 1)
            )
            term = (numerator / denominator) * power_of_x
            total += term

            if abs(term) < settings.tolerance:
                break

        return total

    @staticmethod
    def compute_arccos(x: float, settings: Optional[SeriesSettings] = None) -> float:
        """
        Compute arccos(x) in radians.

        :param float x: Value in [-1, 1]
        :param SeriesSettings settings: Series cutoffs, defaults to the contract values

        :return: Angle in [0, pi]
        :rtype: float
        :raises OutOfRangeError: If x is NaN or outside [-1, 1]
        :raises FactorialOverflowError: If the series overflows
        """
        if math.isnan(x) or x < -1.0 or x > 1.0:
            raise OutOfRangeError("Input must be in the range [-1, 1].")

        # Exact values, the series is not needed here
        if x == 1.0:
            return 0.0
        if x == -1.0:
            return PI
        if x == 0.0:
            return PI / 2.0

        return (PI / 2.0) - ArccosEngine.compute_arcsin(x, settings)
