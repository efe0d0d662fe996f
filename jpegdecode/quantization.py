"""Inverse quantisation of a coefficient vector."""

from __future__ import annotations

from typing import Sequence


def dequantize(vector: Sequence[float], table: Sequence[int] | None) -> list[float]:
    """Return ``vector`` multiplied element-wise by the quantisation table."""
    if table is None:
        raise ValueError("quantisation table is missing")
    if len(table) < len(vector):
        raise ValueError("quantisation table is shorter than the vector")
    return [value * factor for value, factor in zip(vector, table)]