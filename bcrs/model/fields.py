# bcrs/model/fields.py
# Canonical GF(256) fields used by barcode symbologies
#
#   Data Matrix / Aztec: p(x) = x^8 + x^5 + x^3 + x^2 + 1  -> 0x12D, b = 1
#   QR Code:             p(x) = x^8 + x^4 + x^3 + x^2 + 1  -> 0x11D, b = 0
#
# Each preset is built at most once per process, on first use. The lock
# makes the first build safe when several threads race for it.

import threading
from dataclasses import dataclass
from typing import Dict

from bcrs.model.errors import ConfigurationError
from bcrs.model.galois import GaloisField, make_field


@dataclass(frozen=True)
class FieldCfg:
    # primitive polynomial including the x^8 term
    prim_poly: int
    size: int = 256
    # first consecutive root alpha^b of the generator polynomial
    generator_base: int = 0

    def build(self) -> GaloisField:
        return make_field(self.prim_poly, self.size, self.generator_base)


DATA_MATRIX_CFG = FieldCfg(prim_poly=0b100101101, size=256, generator_base=1)
QR_CODE_CFG = FieldCfg(prim_poly=0b100011101, size=256, generator_base=0)

PRESETS: Dict[str, FieldCfg] = {
    "data_matrix": DATA_MATRIX_CFG,
    "qr_code": QR_CODE_CFG,
}

_fields: Dict[str, GaloisField] = {}
_lock = threading.Lock()


def _preset(name: str) -> GaloisField:
    field = _fields.get(name)
    if field is None:
        with _lock:
            field = _fields.get(name)
            if field is None:
                field = PRESETS[name].build()
                _fields[name] = field
    return field


def data_matrix_field() -> GaloisField:
    return _preset("data_matrix")


def qr_code_field() -> GaloisField:
    return _preset("qr_code")


def field_by_name(name: str) -> GaloisField:
    if name not in PRESETS:
        raise ConfigurationError(
            f"unknown field preset {name!r}, expected one of {sorted(PRESETS)}"
        )
    return _preset(name)
