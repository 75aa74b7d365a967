"""Utility functions for slicequota."""

from slicequota.utils.resource_parser import (
    cpu_to_millicores,
    format_cpu_millicores,
    format_memory_bytes,
    memory_to_bytes,
    parse_quantity,
)

__all__ = [
    "cpu_to_millicores",
    "format_cpu_millicores",
    "format_memory_bytes",
    "memory_to_bytes",
    "parse_quantity",
]
