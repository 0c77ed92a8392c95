"""Extraction — разбор документа с долями в отсортированный набор точек."""

from .points import Reporter, extract, parse_x_coordinate

__all__ = [
    "Reporter",
    "extract",
    "parse_x_coordinate",
]
