"""Process-wide settings read once from the environment."""

from __future__ import annotations

import os

# Signed 16-bit exponents; crossing the bound raises ExponentOverflow.
EXPONENT_BITS = 16
EXPONENT_MIN = -(1 << (EXPONENT_BITS - 1))
EXPONENT_MAX = (1 << (EXPONENT_BITS - 1)) - 1

DEFAULT_POLICY = os.getenv("DIMSCALE_POLICY", "strict").lower()
FACTOR_RTOL = float(os.getenv("DIMSCALE_FACTOR_RTOL", "1e-12"))
UNICODE_OUTPUT = os.getenv("DIMSCALE_UNICODE", "1").lower() not in {"0", "false", "no", "off"}
VALUE_PRECISION = max(1, int(os.getenv("DIMSCALE_VALUE_PRECISION", "12")))

__all__ = [
    "EXPONENT_BITS",
    "EXPONENT_MIN",
    "EXPONENT_MAX",
    "DEFAULT_POLICY",
    "FACTOR_RTOL",
    "UNICODE_OUTPUT",
    "VALUE_PRECISION",
]
