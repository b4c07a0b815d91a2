#!/usr/bin/env python3

# Byte-level wrappers around Encoder/Decoder
# input bytes -> [data || parity] codeword, codeword -> corrected data
#
# examples:
#   python -m bcrs.model.codec encode --field qr_code --ec 10 --text "HELLO WORLD"
#   python -m bcrs.model.codec decode --field data_matrix --ec 5 --hex "8E A4 BA 72 19 05 58 66"
#   python -m bcrs.model.codec encode --ec 32 --block 223 --infile input.bin --out out.bin
#
# Notes:
# - the default field is Data Matrix (0x12D, b=1)
# - block mode needs an input length that is a multiple of --block unless --pad is given

import argparse
import sys
import threading
from typing import Dict, Optional, Sequence

from bcrs.model.decoder import Decoder
from bcrs.model.encoder import Encoder
from bcrs.model.errors import ConfigurationError, DecodingFailure
from bcrs.model.fields import PRESETS, data_matrix_field, field_by_name
from bcrs.model.galois import GaloisField
from bcrs.model.helpers import chunk_bytes, hex_dump, pad_to_block

_ENCODERS: Dict[GaloisField, Encoder] = {}
_DECODERS: Dict[GaloisField, Decoder] = {}
_lock = threading.Lock()


def _get_components(field: Optional[GaloisField]):
    """Lazily instantiate the encoder/decoder pair for a field."""
    if field is None:
        field = data_matrix_field()
    with _lock:
        if field not in _ENCODERS:
            _ENCODERS[field] = Encoder(field)
            _DECODERS[field] = Decoder(field)
        return _ENCODERS[field], _DECODERS[field]


def rs_encode(data: bytes, ec_len: int, field: Optional[GaloisField] = None) -> bytes:
    encoder, _ = _get_components(field)
    buf = bytearray(data) + bytearray(ec_len)
    encoder.encode(buf, ec_len)
    return bytes(buf)


def rs_decode(codeword: bytes, ec_len: int, field: Optional[GaloisField] = None) -> bytes:
    _, decoder = _get_components(field)
    buf = bytearray(codeword)
    decoder.decode(buf, ec_len)
    return bytes(buf[:-ec_len])


def is_valid_codeword(codeword: bytes, ec_len: int, field: Optional[GaloisField] = None) -> bool:
    _, decoder = _get_components(field)
    return not any(decoder.syndromes(codeword, ec_len))


def rs_encode_blocks(
    data: bytes, block_bytes: int, ec_len: int, field: Optional[GaloisField] = None
) -> bytes:
    # each block of block_bytes data bytes becomes block_bytes + ec_len bytes
    if block_bytes <= 0 or len(data) % block_bytes != 0:
        raise ConfigurationError(
            f"Input length {len(data)} must be a multiple of {block_bytes} bytes"
        )
    out = bytearray()
    for block in chunk_bytes(data, block_bytes):
        out += rs_encode(block, ec_len, field)
    return bytes(out)


def rs_decode_blocks(
    codewords: bytes, block_bytes: int, ec_len: int, field: Optional[GaloisField] = None
) -> bytes:
    cw_len = block_bytes + ec_len
    if block_bytes <= 0 or len(codewords) % cw_len != 0:
        raise ConfigurationError(
            f"Input length {len(codewords)} must be a multiple of {cw_len} bytes"
        )
    out = bytearray()
    for cw in chunk_bytes(codewords, cw_len):
        out += rs_decode(cw, ec_len, field)
    return bytes(out)


def _read_input(args: argparse.Namespace) -> bytes:
    if args.text is not None:
        return args.text.encode("utf-8")
    if args.hex is not None:
        s = args.hex.replace(" ", "").replace("\n", "")
        try:
            return bytes.fromhex(s)
        except ValueError:
            print("Error: --hex contains non-hex characters.", file=sys.stderr)
            sys.exit(2)
    if args.infile is not None:
        with open(args.infile, "rb") as f:
            return f.read()
    # Fallback: read from stdin as text
    data = sys.stdin.read()
    if not data:
        print("No input provided. Use --text/--hex/--infile or pipe data via stdin.", file=sys.stderr)
        sys.exit(2)
    return data.encode("utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Reed-Solomon encode/decode over GF(256).")
    p.add_argument("mode", choices=["encode", "decode"])
    src = p.add_mutually_exclusive_group()
    src.add_argument("--text", help="UTF-8 text input.")
    src.add_argument("--hex", help="Hex string input (spaces allowed).")
    src.add_argument("--infile", help="Binary input file.")
    p.add_argument("--field", default="data_matrix", choices=sorted(PRESETS),
                   help="Field preset (default: data_matrix).")
    p.add_argument("--ec", type=int, required=True, help="Number of parity bytes per codeword.")
    p.add_argument("--block", type=int, default=None,
                   help="Data bytes per codeword; splits the input into several codewords.")
    p.add_argument("--pad", action="store_true",
                   help="Zero-pad the input to a multiple of --block before encoding.")
    p.add_argument("--out", help="Write the binary result to this file.")
    args = p.parse_args(argv)

    data = _read_input(args)
    field = field_by_name(args.field)

    try:
        if args.mode == "encode":
            if args.block:
                if args.pad:
                    data = pad_to_block(data, args.block)
                result = rs_encode_blocks(data, args.block, args.ec, field)
            else:
                result = rs_encode(data, args.ec, field)
        else:
            if args.block:
                result = rs_decode_blocks(data, args.block, args.ec, field)
            else:
                result = rs_decode(data, args.ec, field)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except DecodingFailure as e:
        print(f"[FAIL] decoding failed: {e}", file=sys.stderr)
        return 1

    print(f"[info] field={args.field} ({field!r}) ec={args.ec} in={len(data)} out={len(result)}")
    print(hex_dump(result))
    if args.out:
        with open(args.out, "wb") as f:
            f.write(result)
        print(f"[info] wrote {len(result)} bytes to {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
