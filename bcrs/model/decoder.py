# bcrs/model/decoder.py
# Reed-Solomon decoder, corrects errors in place
#
# received word r(x) = c(x) + e(x), buffer[0] is the x^(n-1) coefficient
#   1. syndromes S_i = r(alpha^(b+i)), i = 0..ec_len-1 (all zero -> valid)
#   2. extended Euclid on (x^ec_len, S(x)) until deg r < ec_len/2
#      gives the error locator sigma(x) and error evaluator omega(x)
#   3. Chien search: roots of sigma are the inverses of the error locations
#   4. Forney: error magnitudes from omega and the other locations
#
# at most ec_len // 2 byte errors are corrected. above that the decoder may
# raise DecodingFailure or silently return a different valid codeword.

import logging
from typing import List, MutableSequence, Sequence, Tuple

from bcrs.model.errors import ConfigurationError, DecodingFailure
from bcrs.model.galois import GaloisField
from bcrs.model.polynomial import Polynomial

log = logging.getLogger(__name__)


class Decoder:
    """Stateless decoder bound to one field; safe to share between threads."""

    def __init__(self, field: GaloisField):
        self.field = field

    def syndromes(self, buffer: Sequence[int], ec_len: int) -> List[int]:
        """Return [S_0, ..., S_{ec_len-1}]; all zero iff buffer is a codeword."""
        poly = Polynomial(self.field, buffer)
        base = self.field.generator_base
        return [poly.evaluate_at(self.field.exp(i + base)) for i in range(ec_len)]

    def decode(self, buffer: MutableSequence[int], ec_len: int) -> int:
        """Correct ``buffer`` in place.

        Returns:
            number of byte positions that were corrected (0 for a valid codeword).

        Raises:
            ConfigurationError: ec_len is not in [1, len(buffer)).
            DecodingFailure: the errors could not be located or corrected.
        """
        if ec_len <= 0:
            raise ConfigurationError("no error correction bytes requested")
        if ec_len >= len(buffer):
            raise ConfigurationError(
                f"no data bytes: buffer of {len(buffer)} bytes with ec_len={ec_len}"
            )

        syndrome_values = self.syndromes(buffer, ec_len)
        if not any(syndrome_values):
            return 0

        # highest index first, S_{ec_len-1} leads
        syndrome = Polynomial(self.field, syndrome_values[::-1])
        sigma, omega = self._run_euclidean_algorithm(
            self.field.build_monomial(ec_len, 1), syndrome, ec_len
        )
        error_locations = self._find_error_locations(sigma)
        error_magnitudes = self._find_error_magnitudes(omega, error_locations)
        log.debug("located %d error(s) in %d-byte word", len(error_locations), len(buffer))

        for location, magnitude in zip(error_locations, error_magnitudes):
            position = len(buffer) - 1 - self.field.log(location)
            if position < 0:
                log.debug("error location %d falls before buffer start", location)
                raise DecodingFailure("bad error location")
            buffer[position] ^= magnitude
        return len(error_locations)

    def _run_euclidean_algorithm(
        self, a: Polynomial, b: Polynomial, R: int
    ) -> Tuple[Polynomial, Polynomial]:
        # keep a as the higher degree operand
        if a.degree < b.degree:
            a, b = b, a

        field = self.field
        r_last, r = a, b
        t_last, t = field.zero, field.one

        # run until deg r < R/2
        while 2 * r.degree >= R:
            r_last_last, t_last_last = r_last, t_last
            r_last, t_last = r, t

            if r_last.is_zero():
                log.debug("euclid: r_{i-1} was zero")
                raise DecodingFailure("r_{i-1} was zero")

            # divide r_{i-2} by r_{i-1}; remainder becomes r_i
            r = r_last_last
            q = field.zero
            dlt_inverse = field.inverse(r_last.coefficient_at(r_last.degree))
            while r.degree >= r_last.degree and not r.is_zero():
                degree_diff = r.degree - r_last.degree
                scale = field.multiply(r.coefficient_at(r.degree), dlt_inverse)
                q = q.add_or_subtract(field.build_monomial(degree_diff, scale))
                r = r.add_or_subtract(r_last.multiply_by_monomial(degree_diff, scale))

            t = q.multiply(t_last).add_or_subtract(t_last_last)

            if r.degree >= r_last.degree:
                log.debug("euclid: division did not reduce degree %d", r.degree)
                raise DecodingFailure("division algorithm failed to reduce polynomial")

        sigma_tilde_at_zero = t.coefficient_at(0)
        if sigma_tilde_at_zero == 0:
            log.debug("euclid: sigma~(0) was zero")
            raise DecodingFailure("sigma~(0) was zero")

        inverse = field.inverse(sigma_tilde_at_zero)
        sigma = t.multiply(inverse)
        omega = r.multiply(inverse)
        return sigma, omega

    def _find_error_locations(self, error_locator: Polynomial) -> List[int]:
        num_errors = error_locator.degree
        if num_errors == 1:
            # sigma(x) = 1 + X*x, the only location is X
            return [error_locator.coefficient_at(1)]
        result: List[int] = []
        # Chien search over every nonzero element
        for i in range(1, self.field.size):
            if len(result) == num_errors:
                break
            if error_locator.evaluate_at(i) == 0:
                result.append(self.field.inverse(i))
        if len(result) != num_errors:
            log.debug("chien: %d root(s) for a degree %d locator", len(result), num_errors)
            raise DecodingFailure("error locator degree does not match number of roots")
        return result

    def _find_error_magnitudes(
        self, error_evaluator: Polynomial, error_locations: Sequence[int]
    ) -> List[int]:
        field = self.field
        result: List[int] = []
        for i, location in enumerate(error_locations):
            xi_inverse = field.inverse(location)
            denominator = 1
            for j, other in enumerate(error_locations):
                if i != j:
                    # 1 + X_j / X_i, the derivative of sigma without the X_i factor
                    denominator = field.multiply(
                        denominator, 1 ^ field.multiply(other, xi_inverse)
                    )
            magnitude = field.multiply(
                error_evaluator.evaluate_at(xi_inverse), field.inverse(denominator)
            )
            if field.generator_base != 0:
                magnitude = field.multiply(magnitude, xi_inverse)
            result.append(magnitude)
        return result
