# bcrs/model/polynomial.py
# Polynomials over a GaloisField
# Coefficients are kept highest degree first: [3, 2, 1] is 3x^2 + 2x + 1.
# Leading zeros are stripped on construction; the zero polynomial is [0].
# Instances are immutable: every operation returns a new Polynomial (or one
# of the field's shared zero/one instances).

from typing import Iterable, Tuple, Union

from bcrs.model.errors import ConfigurationError, FieldError


class Polynomial:
    """Immutable polynomial with coefficients in ``field``."""

    __slots__ = ("field", "coefficients", "degree")

    def __init__(self, field, coefficients: Iterable[int]):
        coefficients = tuple(int(c) for c in coefficients)
        if not coefficients:
            raise ConfigurationError("polynomial needs at least one coefficient")
        if len(coefficients) > 1 and coefficients[0] == 0:
            first_non_zero = 1
            while first_non_zero < len(coefficients) and coefficients[first_non_zero] == 0:
                first_non_zero += 1
            if first_non_zero == len(coefficients):
                coefficients = (0,)
            else:
                coefficients = coefficients[first_non_zero:]
        self.field = field
        self.coefficients: Tuple[int, ...] = coefficients
        self.degree = len(coefficients) - 1

    def _check_field(self, other: "Polynomial"):
        if self.field is not other.field:
            raise ConfigurationError("polynomials do not belong to the same field")

    def is_zero(self) -> bool:
        return self.coefficients[0] == 0

    def coefficient_at(self, degree: int) -> int:
        if degree < 0 or degree > self.degree:
            raise IndexError(f"degree {degree} outside [0, {self.degree}]")
        return self.coefficients[self.degree - degree]

    def evaluate_at(self, a: int) -> int:
        if a == 0:
            return self.coefficient_at(0)
        if a == 1:
            # every power of 1 is 1, so the sum collapses to XOR of coefficients
            result = 0
            for c in self.coefficients:
                result ^= c
            return result
        # Horner
        mul = self.field.multiply
        result = self.coefficients[0]
        for c in self.coefficients[1:]:
            result = mul(a, result) ^ c
        return result

    def add_or_subtract(self, other: "Polynomial") -> "Polynomial":
        self._check_field(other)
        if self.is_zero():
            return other
        if other.is_zero():
            return self

        smaller, larger = self.coefficients, other.coefficients
        if len(smaller) > len(larger):
            smaller, larger = larger, smaller
        length_diff = len(larger) - len(smaller)
        # high-order terms of the longer operand pass through unchanged
        sum_diff = list(larger[:length_diff])
        sum_diff.extend(s ^ l for s, l in zip(smaller, larger[length_diff:]))
        return Polynomial(self.field, sum_diff)

    def multiply(self, other: Union["Polynomial", int]) -> "Polynomial":
        if isinstance(other, Polynomial):
            return self._multiply_poly(other)
        return self._multiply_scalar(other)

    def _multiply_poly(self, other: "Polynomial") -> "Polynomial":
        self._check_field(other)
        if self.is_zero() or other.is_zero():
            return self.field.zero
        mul = self.field.multiply
        a, b = self.coefficients, other.coefficients
        product = [0] * (len(a) + len(b) - 1)
        for i, ai in enumerate(a):
            if ai == 0:
                continue
            for j, bj in enumerate(b):
                product[i + j] ^= mul(ai, bj)
        return Polynomial(self.field, product)

    def _multiply_scalar(self, scalar: int) -> "Polynomial":
        if scalar == 0:
            return self.field.zero
        if scalar == 1:
            return self
        mul = self.field.multiply
        return Polynomial(self.field, [mul(c, scalar) for c in self.coefficients])

    def multiply_by_monomial(self, degree: int, coefficient: int) -> "Polynomial":
        """Return self * coefficient * x^degree."""
        if degree < 0:
            raise ConfigurationError(f"monomial degree must be >= 0, got {degree}")
        if coefficient == 0:
            return self.field.zero
        mul = self.field.multiply
        product = [mul(c, coefficient) for c in self.coefficients]
        product.extend([0] * degree)
        return Polynomial(self.field, product)

    def divide(self, other: "Polynomial") -> Tuple["Polynomial", "Polynomial"]:
        """Long division over the field.

        Returns:
            (quotient, remainder) with ``self == quotient * other + remainder``
            and ``remainder.degree < other.degree`` (or remainder zero).
        """
        self._check_field(other)
        if other.is_zero():
            raise FieldError("division by the zero polynomial")

        field = self.field
        quotient = field.zero
        remainder = self

        inverse_denominator_leading_term = field.inverse(other.coefficient_at(other.degree))

        while remainder.degree >= other.degree and not remainder.is_zero():
            degree_difference = remainder.degree - other.degree
            scale = field.multiply(remainder.coefficient_at(remainder.degree),
                                   inverse_denominator_leading_term)
            term = other.multiply_by_monomial(degree_difference, scale)
            quotient = quotient.add_or_subtract(field.build_monomial(degree_difference, scale))
            remainder = remainder.add_or_subtract(term)

        return quotient, remainder

    def __len__(self) -> int:
        return len(self.coefficients)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.field is other.field and self.coefficients == other.coefficients

    def __hash__(self) -> int:
        return hash((id(self.field), self.coefficients))

    def __repr__(self) -> str:
        return f"Polynomial({list(self.coefficients)})"
