"""Polynomial evaluation and exact Lagrange interpolation."""

from fractions import Fraction
from typing import Sequence


def evaluate_polynomial(
    coefficients: Sequence[int],
    x: int,
    modulus: int | None = None,
) -> int:
    """Evaluate a polynomial at point x using Horner's method.

    Args:
        coefficients: Coefficients from the constant term upwards
        x: Evaluation point
        modulus: Reduce modulo this value after each step, if given

    Returns:
        The polynomial value at x
    """
    result = 0
    for coef in reversed(coefficients):
        result = result * x + coef
        if modulus is not None:
            result %= modulus
    return result


def lagrange_interpolate(points: Sequence[tuple[int, int]], x: int = 0) -> Fraction:
    """Interpolate the polynomial through the given points and evaluate it at x.

    Computed over the rationals, so the result is exact. Callers reduce the
    result to the field or check integrality.

    Args:
        points: (x_i, y_i) pairs with distinct x_i
        x: Point to evaluate at (0 recovers the constant term)

    Returns:
        The interpolated value as an exact fraction
    """
    result = Fraction(0)

    for i, (xi, yi) in enumerate(points):
        # term = yi * prod_{j != i} (x - xj) / (xi - xj)
        numerator = yi
        denominator = 1
        for j, (xj, _) in enumerate(points):
            if i != j:
                numerator *= x - xj
                denominator *= xi - xj
        result += Fraction(numerator, denominator)

    return result


def reduce_fraction_mod(value: Fraction, modulus: int) -> int:
    """Map a rational to the field of integers modulo a prime.

    Raises:
        ValueError: If the denominator is not invertible modulo ``modulus``
    """
    return value.numerator * pow(value.denominator, -1, modulus) % modulus
