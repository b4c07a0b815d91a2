import pytest

from bcrs.model.errors import ConfigurationError, FieldError
from bcrs.model.galois import make_field
from bcrs.model.polynomial import Polynomial


def P(field, *coeffs):
    return Polynomial(field, coeffs)


def test_leading_zeros_are_stripped(qr_field):
    p = P(qr_field, 0, 0, 3, 1)
    assert p.coefficients == (3, 1)
    assert p.degree == 1
    z = P(qr_field, 0, 0, 0)
    assert z.coefficients == (0,)
    assert z.is_zero()


def test_empty_coefficients_rejected(qr_field):
    with pytest.raises(ConfigurationError):
        Polynomial(qr_field, [])


def test_coefficients_are_owned_copy(qr_field):
    src = [1, 2, 3]
    p = Polynomial(qr_field, src)
    src[0] = 9
    assert p.coefficients == (1, 2, 3)


def test_coefficient_at(qr_field):
    p = P(qr_field, 5, 6, 7)
    assert p.coefficient_at(0) == 7
    assert p.coefficient_at(2) == 5
    with pytest.raises(IndexError):
        p.coefficient_at(3)


def test_evaluate_at(qr_field):
    p = P(qr_field, 5, 6, 7)
    assert p.evaluate_at(0) == 7
    assert p.evaluate_at(1) == 5 ^ 6 ^ 7
    x = P(qr_field, 1, 0)
    assert x.evaluate_at(2) == 2
    assert P(qr_field, 1, 0, 0).evaluate_at(2) == 4
    # x^8 at alpha is the reduced primitive polynomial
    assert qr_field.build_monomial(8, 1).evaluate_at(2) == 0x1D


def test_add_or_subtract(qr_field):
    a = P(qr_field, 1, 2, 3)
    b = P(qr_field, 2, 3)
    assert a.add_or_subtract(b).coefficients == (1, 0, 0)
    assert a.add_or_subtract(qr_field.zero) is a
    assert qr_field.zero.add_or_subtract(b) is b
    assert a.add_or_subtract(a).is_zero()


def test_multiply_polynomials(qr_field):
    x_plus_1 = P(qr_field, 1, 1)
    assert x_plus_1.multiply(x_plus_1).coefficients == (1, 0, 1)
    assert x_plus_1.multiply(qr_field.zero) is qr_field.zero
    # (x + 1)(x + 2) = x^2 + 3x + 2
    assert x_plus_1.multiply(P(qr_field, 1, 2)).coefficients == (1, 3, 2)


def test_multiply_scalar(qr_field):
    p = P(qr_field, 1, 2, 3)
    assert p.multiply(1) is p
    assert p.multiply(0) is qr_field.zero
    assert p.multiply(2).coefficients == (2, 4, 6)


def test_multiply_by_monomial(qr_field):
    p = P(qr_field, 1, 2)
    assert p.multiply_by_monomial(2, 1).coefficients == (1, 2, 0, 0)
    assert p.multiply_by_monomial(1, 2).coefficients == (2, 4, 0)
    assert p.multiply_by_monomial(3, 0) is qr_field.zero
    with pytest.raises(ConfigurationError):
        p.multiply_by_monomial(-1, 1)


@pytest.mark.parametrize("dividend,divisor", [
    ((5, 7, 9, 11, 13), (1, 3, 2)),
    ((0x40, 0xD2, 0x75, 0x47, 0x76, 0x17), (7, 0, 0x1F)),
    ((1, 2), (1, 2, 3)),
    ((9,), (4,)),
])
def test_divide(any_field, dividend, divisor):
    a = Polynomial(any_field, dividend)
    b = Polynomial(any_field, divisor)
    q, r = a.divide(b)
    assert q.multiply(b).add_or_subtract(r) == a
    assert r.is_zero() or r.degree < b.degree


def test_divide_exact(qr_field):
    a = P(qr_field, 1, 3, 2)
    q, r = a.divide(P(qr_field, 1, 1))
    assert q.coefficients == (1, 2)
    assert r.is_zero()


def test_divide_by_zero(qr_field):
    with pytest.raises(FieldError):
        P(qr_field, 1, 2).divide(qr_field.zero)


def test_mixed_fields_rejected(qr_field, dm_field):
    other = make_field(0x11D, 256, 0)
    a = P(qr_field, 1, 2)
    for b in (P(dm_field, 1, 2), P(other, 1, 2)):
        with pytest.raises(ConfigurationError):
            a.add_or_subtract(b)
        with pytest.raises(ConfigurationError):
            a.multiply(b)
        with pytest.raises(ConfigurationError):
            a.divide(b)


def test_value_semantics(qr_field):
    assert P(qr_field, 0, 1, 2) == P(qr_field, 1, 2)
    assert hash(P(qr_field, 0, 1, 2)) == hash(P(qr_field, 1, 2))
    assert len(P(qr_field, 1, 2)) == 2
    assert repr(P(qr_field, 1, 2)) == "Polynomial([1, 2])"
