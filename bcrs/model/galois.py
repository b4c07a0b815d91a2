# bcrs/model/galois.py
# GF(2^m) arithmetic backed by exp/log tables
# elements are ints in [0, size), addition is XOR, multiplication goes
# through log space: a*b = exp[(log[a] + log[b]) mod (size-1)]
#
# the field is built once and never mutated afterwards, so one instance can
# be shared by any number of encoders/decoders (and threads)

from typing import List

from bcrs.model.errors import ConfigurationError, FieldError
from bcrs.model.polynomial import Polynomial


class GaloisField:
    """GF(size) defined by a primitive polynomial.

    Args:
        primitive: primitive polynomial as a bitmask, including the x^m term
            (e.g. 0x11D for x^8 + x^4 + x^3 + x^2 + 1).
        size: number of field elements, a power of two (256 for GF(2^8)).
        generator_base: exponent of the first consecutive root alpha^b used
            by the generator polynomial and the syndromes.
    """

    def __init__(self, primitive: int, size: int, generator_base: int):
        if size < 2 or size & (size - 1):
            raise ConfigurationError(f"field size must be a power of two >= 2, got {size}")
        if generator_base < 0:
            raise ConfigurationError(f"generator base must be >= 0, got {generator_base}")
        self.primitive = primitive
        self.size = size
        self.generator_base = generator_base
        self.exp_table: List[int] = [0] * size
        self.log_table: List[int] = [0] * size   # log(0) undefined, we keep 0
        self._build_tables()

        self.zero = Polynomial(self, [0])
        self.one = Polynomial(self, [1])

    def _build_tables(self):
        # start at alpha^0 = 1 and keep multiplying by alpha (x -> 2x),
        # reducing by the primitive polynomial when degree m appears
        x = 1
        for i in range(self.size):
            self.exp_table[i] = x
            x <<= 1
            if x >= self.size:
                x ^= self.primitive
                x &= self.size - 1
        seen = set()
        for i in range(self.size - 1):
            seen.add(self.exp_table[i])
            self.log_table[self.exp_table[i]] = i
        # a non-primitive polynomial cycles early and leaves holes in log
        if len(seen) != self.size - 1 or 0 in seen:
            raise ConfigurationError(
                f"0x{self.primitive:X} is not primitive for a field of size {self.size}"
            )

    @staticmethod
    def add_or_subtract(a: int, b: int) -> int:
        # characteristic 2: a + b == a - b == a XOR b
        return a ^ b

    def exp(self, a: int) -> int:
        return self.exp_table[a % (self.size - 1)]

    def log(self, a: int) -> int:
        if a == 0:
            raise FieldError("log(0) is undefined")
        return self.log_table[a]

    def inverse(self, a: int) -> int:
        if a == 0:
            raise FieldError("0 has no multiplicative inverse")
        return self.exp_table[self.size - 1 - self.log_table[a]]

    def multiply(self, a: int, b: int) -> int:
        if a == 0 or b == 0:
            return 0
        return self.exp_table[(self.log_table[a] + self.log_table[b]) % (self.size - 1)]

    def build_monomial(self, degree: int, coefficient: int) -> Polynomial:
        """Return coefficient * x^degree (the zero polynomial for coefficient 0)."""
        if degree < 0:
            raise ConfigurationError(f"monomial degree must be >= 0, got {degree}")
        if coefficient == 0:
            return self.zero
        coefficients = [0] * (degree + 1)
        coefficients[0] = coefficient
        return Polynomial(self, coefficients)

    def __repr__(self) -> str:
        return f"GaloisField(0x{self.primitive:04X}, {self.size}, {self.generator_base})"


def make_field(primitive: int, size: int, generator_base: int) -> GaloisField:
    return GaloisField(primitive, size, generator_base)
