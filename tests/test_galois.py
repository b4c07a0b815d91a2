import threading

import pytest

from bcrs.model.errors import ConfigurationError, FieldError
from bcrs.model.fields import (
    DATA_MATRIX_CFG,
    QR_CODE_CFG,
    data_matrix_field,
    field_by_name,
    qr_code_field,
)
from bcrs.model.galois import GaloisField, make_field


def test_tables_are_inverse(any_field):
    for x in range(1, 256):
        assert any_field.exp_table[any_field.log(x)] == x
    # cyclic with period size - 1
    assert any_field.exp_table[255] == any_field.exp_table[0] == 1


def test_exp_visits_every_nonzero_element(any_field):
    assert sorted(any_field.exp_table[:255]) == list(range(1, 256))


def test_reduction_uses_primitive_polynomial(dm_field, qr_field):
    assert dm_field.exp(7) == 0x80
    assert dm_field.exp(8) == 0x2D
    assert qr_field.exp(8) == 0x1D
    assert qr_field.multiply(2, 0x80) == 0x1D


def test_exp_wraps_around(qr_field):
    assert qr_field.exp(255) == 1
    assert qr_field.exp(256) == 2


def test_add_or_subtract_is_xor():
    assert GaloisField.add_or_subtract(0x53, 0xCA) == 0x99
    assert GaloisField.add_or_subtract(0x53, 0x53) == 0


def test_multiply_and_inverse(any_field):
    assert any_field.multiply(0, 77) == 0
    assert any_field.multiply(77, 0) == 0
    assert any_field.multiply(1, 77) == 77
    for a in range(1, 256):
        assert any_field.multiply(a, any_field.inverse(a)) == 1


def test_multiply_is_commutative_and_distributive(qr_field):
    for a, b, c in [(3, 7, 200), (0x53, 0xCA, 0x11), (255, 254, 1)]:
        assert qr_field.multiply(a, b) == qr_field.multiply(b, a)
        assert qr_field.multiply(a, b ^ c) == qr_field.multiply(a, b) ^ qr_field.multiply(a, c)


def test_log_and_inverse_of_zero_fail(any_field):
    with pytest.raises(FieldError):
        any_field.log(0)
    with pytest.raises(FieldError):
        any_field.inverse(0)


def test_build_monomial(qr_field):
    assert qr_field.build_monomial(3, 5).coefficients == (5, 0, 0, 0)
    assert qr_field.build_monomial(3, 0) is qr_field.zero
    with pytest.raises(ConfigurationError):
        qr_field.build_monomial(-1, 5)


def test_cached_zero_and_one(any_field):
    assert any_field.zero.is_zero()
    assert any_field.one.coefficients == (1,)


@pytest.mark.parametrize("primitive,size,base", [
    (0x11D, 100, 0),    # not a power of two
    (0x11B, 256, 0),    # irreducible but x is not primitive
    (0x11D, 256, -1),
])
def test_bad_field_parameters(primitive, size, base):
    with pytest.raises(ConfigurationError):
        make_field(primitive, size, base)


def test_small_field():
    gf16 = make_field(0x13, 16, 1)
    assert sorted(gf16.exp_table[:15]) == list(range(1, 16))
    assert gf16.multiply(gf16.exp(3), gf16.exp(14)) == gf16.exp(2)


def test_presets_are_singletons():
    assert data_matrix_field() is data_matrix_field()
    assert qr_code_field() is qr_code_field()
    assert data_matrix_field() is not qr_code_field()
    assert field_by_name("qr_code") is qr_code_field()


def test_preset_parameters(dm_field, qr_field):
    assert (dm_field.primitive, dm_field.size, dm_field.generator_base) == (0x12D, 256, 1)
    assert (qr_field.primitive, qr_field.size, qr_field.generator_base) == (0x11D, 256, 0)
    assert DATA_MATRIX_CFG.prim_poly == 0x12D
    assert QR_CODE_CFG.generator_base == 0


def test_unknown_preset():
    with pytest.raises(ConfigurationError):
        field_by_name("aztec_param")


def test_preset_first_use_from_many_threads():
    seen = []

    def grab():
        seen.append(data_matrix_field())

    threads = [threading.Thread(target=grab) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert all(f is seen[0] for f in seen)


def test_cfg_build_makes_independent_field():
    f = QR_CODE_CFG.build()
    assert f is not qr_code_field()
    assert f.exp_table == qr_code_field().exp_table
