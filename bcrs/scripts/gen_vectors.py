#!/usr/bin/env python3
"""Generate Reed-Solomon encoder reference vectors from the Python model.

The vectors are meant for cross-checking other encoder implementations
(firmware, other languages, barcode generators) against this one. A text
file lists every vector as space-separated hex, and a binary twin holds the
same data for fast loading.

    python -m bcrs.scripts.gen_vectors --field qr_code --data-len 16 --ec 10
"""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from bcrs.model.codec import rs_encode
from bcrs.model.fields import PRESETS, field_by_name
from bcrs.model.galois import GaloisField

Vector = Tuple[str, bytes, bytes]


def bytes_to_hex_string(data: bytes) -> str:
    return " ".join(f"{b:02X}" for b in data)


def build_vectors(field: GaloisField, data_len: int, ec_len: int, num_random: int = 10,
                  seed: int = 0x52535F5645435F) -> List[Vector]:
    patterns = [
        ("all_zeros", bytes([0] * data_len)),
        ("all_ones", bytes([0xFF] * data_len)),
        ("pattern_aa", bytes([0xAA] * data_len)),
        ("pattern_55", bytes([0x55] * data_len)),
        ("impulse_start", bytes([0x80] + [0] * (data_len - 1))),
        ("impulse_end", bytes([0] * (data_len - 1) + [0x01])),
        ("counter", bytes([i % 256 for i in range(data_len)])),
        ("reverse_counter", bytes([(255 - i) % 256 for i in range(data_len)])),
    ]

    rng = random.Random(seed)
    for i in range(num_random):
        patterns.append((f"random_{i:02d}", bytes(rng.randrange(256) for _ in range(data_len))))

    return [(name, msg, rs_encode(msg, ec_len, field)) for name, msg in patterns]


def write_vectors(output_file: Path, vectors: Sequence[Vector], field_name: str,
                  data_len: int, ec_len: int) -> Path:
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with output_file.open("w", encoding="utf-8") as f:
        f.write(f"// RS({data_len + ec_len},{data_len}) Encoder Test Vectors, field {field_name}\n")
        f.write("// Format: test_name | input_message | expected_codeword\n")
        f.write("// Each byte in hex, space-separated\n")
        f.write("//\n")
        f.write(f"// Total test vectors: {len(vectors)}\n")
        f.write("//\n\n")

        for name, msg, cw in vectors:
            f.write(f"// Test: {name}\n")
            f.write(f"MSG: {bytes_to_hex_string(msg)}\n")
            f.write(f"CW:  {bytes_to_hex_string(cw)}\n")
            f.write("\n")

    bin_file = output_file.with_suffix(".bin")
    with bin_file.open("wb") as f:
        # header: number of vectors (4 bytes)
        f.write(len(vectors).to_bytes(4, "little"))
        # each vector: message (data_len bytes) + codeword (data_len + ec_len bytes)
        for _, msg, cw in vectors:
            f.write(msg)
            f.write(cw)
    return bin_file


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Generate RS encoder reference vectors.")
    p.add_argument("--field", default="data_matrix", choices=sorted(PRESETS))
    p.add_argument("--data-len", type=int, default=223)
    p.add_argument("--ec", type=int, default=32)
    p.add_argument("--num-random", type=int, default=10)
    p.add_argument("--seed", type=lambda s: int(s, 0), default=0x52535F5645435F)
    p.add_argument("--out", default="vectors/rs_encoder_vectors.txt")
    args = p.parse_args(argv)

    if args.data_len <= 0 or args.ec <= 0:
        raise SystemExit("--data-len and --ec must be positive")

    field = field_by_name(args.field)
    vectors = build_vectors(field, args.data_len, args.ec, args.num_random, args.seed)
    out = Path(args.out)
    bin_file = write_vectors(out, vectors, args.field, args.data_len, args.ec)

    print(f"Generated {len(vectors)} test vectors")
    print(f"Written to: {out}")
    print(f"Binary format: {bin_file}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
