# bcrs/model/encoder.py
# Systematic Reed-Solomon encoder
# codeword = [data (len - ec_len bytes)] || [parity (ec_len bytes)]
# parity = remainder of m(x) * x^ec_len divided by the generator
# g(x) = prod_{i=0}^{ec_len-1} (x - alpha^(b+i)), b = field.generator_base

import threading
from typing import List, MutableSequence

from bcrs.model.errors import ConfigurationError
from bcrs.model.galois import GaloisField
from bcrs.model.polynomial import Polynomial


class Encoder:
    def __init__(self, field: GaloisField):
        self.field = field
        self._generators: List[Polynomial] = [Polynomial(field, [1])]
        self._lock = threading.Lock()

    def build_generator(self, degree: int) -> Polynomial:
        """Generator polynomial of the given degree, cached across calls."""
        if degree < 0:
            raise ConfigurationError(f"generator degree must be >= 0, got {degree}")
        if degree < len(self._generators):
            return self._generators[degree]
        with self._lock:
            last = self._generators[-1]
            for d in range(len(self._generators), degree + 1):
                # (x - root) == (x + root) in characteristic 2 -> [1, root]
                root = self.field.exp(d - 1 + self.field.generator_base)
                last = last.multiply(Polynomial(self.field, [1, root]))
                self._generators.append(last)
            return self._generators[degree]

    def encode(self, buffer: MutableSequence[int], ec_len: int) -> None:
        """Fill ``buffer[-ec_len:]`` with parity for ``buffer[:-ec_len]``.

        The data region is left as is. ``buffer`` may be a bytearray, a list of
        ints or an integer numpy array.
        """
        if ec_len <= 0:
            raise ConfigurationError("no error correction bytes requested")
        data_len = len(buffer) - ec_len
        if data_len <= 0:
            raise ConfigurationError(
                f"no data bytes: buffer of {len(buffer)} bytes with ec_len={ec_len}"
            )
        generator = self.build_generator(ec_len)

        info = Polynomial(self.field, buffer[:data_len])
        info = info.multiply_by_monomial(ec_len, 1)
        remainder = info.divide(generator)[1]

        # the remainder drops leading zeros, pad back to ec_len
        coefficients = remainder.coefficients
        num_zero_coefficients = ec_len - len(coefficients)
        for i in range(num_zero_coefficients):
            buffer[data_len + i] = 0
        for i, c in enumerate(coefficients):
            buffer[data_len + num_zero_coefficients + i] = c
