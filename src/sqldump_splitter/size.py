"""Parsing of human-readable size strings such as 2.5M or 512KI."""

import re

FACTORS = {
    "KI": 1024,
    "MI": 1024 * 1024,
    "GI": 1024 * 1024 * 1024,
    "K": 1000,
    "M": 1000 * 1000,
    "G": 1000 * 1000 * 1000,
}

SIZE_PATTERN = re.compile(r"^(\d+\.?\d*)([KMG]I?)?$")


def parse_size(text: str) -> int:
    """
    Convert a size string into a number of bytes.

    Decimal suffixes (K, M, G) use powers of 1000, binary suffixes (KI, MI, GI)
    use powers of 1024. Matching is case-insensitive and a bare number is
    taken as bytes. Fractions are truncated after scaling.

    Raises ValueError for malformed input or sizes below one byte.
    """
    match = SIZE_PATTERN.match(text.strip().upper())
    if match is None:
        raise ValueError(f"invalid size {text!r}")

    number, suffix = match.groups()
    factor = FACTORS[suffix] if suffix else 1
    size = int(float(number) * factor)
    if size <= 0:
        raise ValueError(f"size must be at least one byte, got {text!r}")
    return size
