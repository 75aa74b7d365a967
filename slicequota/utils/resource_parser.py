"""Resource parsing utilities for CPU and memory quantities.

Converts Kubernetes quantity strings into exact integers:
- CPU: parsed to millicores (int), rounded up like ``Quantity.MilliValue()``
- Memory: parsed to bytes (int), rounded up like ``Quantity.Value()``

and formats integers back into canonical quantity strings for status payloads.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation

# Module-level constants to avoid re-creating on every function call.
# Suffix multipliers, longest suffixes first so "Ki" wins over "k".
_BINARY_SUFFIXES: tuple[tuple[str, int], ...] = (
    ("Ki", 1024),
    ("Mi", 1024**2),
    ("Gi", 1024**3),
    ("Ti", 1024**4),
    ("Pi", 1024**5),
    ("Ei", 1024**6),
)
_DECIMAL_SUFFIXES: dict[str, Decimal] = {
    "n": Decimal("1e-9"),
    "u": Decimal("1e-6"),
    "m": Decimal("1e-3"),
    "": Decimal(1),
    "k": Decimal("1e3"),
    "M": Decimal("1e6"),
    "G": Decimal("1e9"),
    "T": Decimal("1e12"),
    "P": Decimal("1e15"),
    "E": Decimal("1e18"),
}
_QUANTITY_PATTERN = re.compile(r"^\+?(?P<number>[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?P<suffix>.*)$")
_EXPONENT_PATTERN = re.compile(r"^[eE][+-]?[0-9]+$")

# Largest binary suffix first for formatting.
_MEMORY_FORMAT_SUFFIXES: tuple[tuple[str, int], ...] = tuple(reversed(_BINARY_SUFFIXES))


def parse_quantity(quantity: str | int | float) -> Decimal:
    """Parse a Kubernetes quantity into base units.

    Handles the three suffix families Kubernetes accepts:
    - Binary SI: "128Mi" -> 134217728
    - Decimal SI: "250m" -> 0.25, "1G" -> 1000000000, "500000000n" -> 0.5
    - Decimal exponent: "1e3" -> 1000

    Args:
        quantity: Quantity string, or a bare number.

    Returns:
        Exact value in base units (cores or bytes).

    Raises:
        ValueError: If the quantity is empty, negative or malformed.
    """
    if isinstance(quantity, bool):
        raise ValueError(f"Invalid quantity: {quantity!r}")
    if isinstance(quantity, (int, float)):
        if quantity < 0:
            raise ValueError(f"Negative quantity: {quantity!r}")
        return Decimal(str(quantity))

    text = str(quantity).strip()
    if not text:
        raise ValueError("Empty quantity")
    if text.startswith("-"):
        raise ValueError(f"Negative quantity: {text!r}")

    match = _QUANTITY_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Invalid quantity: {text!r}")

    try:
        number = Decimal(match.group("number"))
    except InvalidOperation as exc:
        raise ValueError(f"Invalid quantity: {text!r}") from exc
    suffix = match.group("suffix")

    for binary_suffix, multiplier in _BINARY_SUFFIXES:
        if suffix == binary_suffix:
            return number * multiplier

    if suffix in _DECIMAL_SUFFIXES:
        return number * _DECIMAL_SUFFIXES[suffix]

    if _EXPONENT_PATTERN.match(suffix):
        return number * (Decimal(10) ** int(suffix[1:]))

    raise ValueError(f"Unknown quantity suffix {suffix!r} in {text!r}")


def cpu_to_millicores(cpu: str | int | float) -> int:
    """Convert a CPU quantity to whole millicores.

    Fractional millicores round up, matching ``MilliValue()``:
    "250m" -> 250, "1.5" -> 1500, "12345678n" -> 13.
    """
    return math.ceil(parse_quantity(cpu) * 1000)


def memory_to_bytes(memory: str | int | float) -> int:
    """Convert a memory quantity to whole bytes.

    "10Mi" -> 10485760, "1G" -> 1000000000, "1.5Ki" -> 1536.
    """
    return math.ceil(parse_quantity(memory))


def format_cpu_millicores(millicores: int) -> str:
    """Format millicores as a canonical CPU quantity.

    Whole cores drop the milli suffix: 2000 -> "2", 80 -> "80m", 0 -> "0".
    """
    if millicores < 0:
        raise ValueError(f"Negative CPU value: {millicores}")
    if millicores % 1000 == 0:
        return str(millicores // 1000)
    return f"{millicores}m"


def format_memory_bytes(memory_bytes: int) -> str:
    """Format bytes as a binary SI quantity using the largest exact suffix.

    15728640 -> "15Mi", 1572864 -> "1536Ki", 1000 -> "1000", 0 -> "0".
    """
    if memory_bytes < 0:
        raise ValueError(f"Negative memory value: {memory_bytes}")
    if memory_bytes == 0:
        return "0"
    for suffix, multiplier in _MEMORY_FORMAT_SUFFIXES:
        if memory_bytes % multiplier == 0:
            return f"{memory_bytes // multiplier}{suffix}"
    return str(memory_bytes)
