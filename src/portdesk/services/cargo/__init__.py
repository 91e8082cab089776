"""Cargo analytics helpers."""

from .stats import compute_cargo_stats, parse_cargo_quantity

__all__ = ["compute_cargo_stats", "parse_cargo_quantity"]
