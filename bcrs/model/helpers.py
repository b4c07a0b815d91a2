# bcrs/model/helpers.py
# common helper functions used by the codec, the vector scripts and the tests
# provides block splitting, hex dumps, error counting and channel corruption

from typing import Iterable, List, Optional, Tuple

import numpy as np


def pad_to_block(data: bytes, block_size: int) -> bytes:
    rem = len(data) % block_size
    if rem == 0:
        return data
    return data + bytes(block_size - rem)


def chunk_bytes(data: bytes, chunk_size: int) -> List[bytes]:
    if len(data) % chunk_size != 0:
        raise ValueError(f"Data length {len(data)} is not a multiple of chunk size {chunk_size}")

    chunks = []
    for i in range(0, len(data), chunk_size):
        chunks.append(data[i:i + chunk_size])
    return chunks


def hex_dump(data: Iterable[int], bytes_per_line: int = 16) -> str:
    data = bytes(data)
    lines = []
    for i in range(0, len(data), bytes_per_line):
        chunk = data[i:i + bytes_per_line]
        hex_str = ' '.join(f'{b:02X}' for b in chunk)
        lines.append(f'{i:08X}: {hex_str}')
    return '\n'.join(lines)


def hamming_distance_bytes(a: bytes, b: bytes) -> int:
    if len(a) != len(b):
        raise ValueError(f"Sequences must have equal length: {len(a)} != {len(b)}")

    distance = 0
    for byte_a, byte_b in zip(a, b):
        xor = byte_a ^ byte_b
        # count set bits in XOR
        distance += bin(xor).count('1')
    return distance


def byte_error_count(a: bytes, b: bytes) -> int:
    # number of symbol (byte) positions that differ, what RS actually corrects
    if len(a) != len(b):
        raise ValueError(f"Sequences must have equal length: {len(a)} != {len(b)}")
    return sum(1 for x, y in zip(a, b) if x != y)


def inject_byte_errors(
    codeword: bytes,
    count: int,
    seed: Optional[int] = None,
    positions: Optional[Iterable[int]] = None,
) -> Tuple[bytearray, List[int]]:
    """Corrupt ``count`` distinct byte positions of a codeword.

    Args:
        codeword: Clean codeword (left untouched).
        count: Number of distinct positions to corrupt (ignored if positions given).
        seed: Optional RNG seed to make the corruption repeatable.
        positions: Explicit positions to corrupt instead of random ones.

    Returns:
        (corrupted copy, sorted corrupted positions). Every corrupted byte is
        guaranteed to differ from the original.
    """
    out = bytearray(codeword)
    rng = np.random.default_rng(seed)

    if positions is None:
        if count < 0 or count > len(out):
            raise ValueError(f"Cannot corrupt {count} positions of a {len(out)}-byte codeword")
        chosen = rng.choice(len(out), size=count, replace=False)
        positions = sorted(int(p) for p in chosen)
    else:
        positions = sorted(set(int(p) for p in positions))
        for p in positions:
            if p < 0 or p >= len(out):
                raise ValueError(f"Position {p} outside codeword of {len(out)} bytes")

    for p in positions:
        # nonzero XOR mask -> the byte always changes
        out[p] ^= int(rng.integers(1, 256))
    return out, positions
