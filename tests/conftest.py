import random

import pytest

from bcrs.model.encoder import Encoder
from bcrs.model.fields import data_matrix_field, qr_code_field


@pytest.fixture
def dm_field():
    return data_matrix_field()


@pytest.fixture
def qr_field():
    return qr_code_field()


@pytest.fixture(params=["data_matrix", "qr_code"])
def any_field(request):
    return data_matrix_field() if request.param == "data_matrix" else qr_code_field()


def make_codeword(field, data_len, ec_len, seed):
    """Random data of data_len bytes followed by its ec_len parity bytes."""
    rng = random.Random(seed)
    buf = bytearray(rng.randrange(256) for _ in range(data_len)) + bytearray(ec_len)
    Encoder(field).encode(buf, ec_len)
    return buf
