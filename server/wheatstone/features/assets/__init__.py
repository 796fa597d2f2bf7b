"""
Подготовка статических картинок (офлайн, запускается вручную).

Этот модуль содержит:
- trimmer: обрезка прозрачных полей, отступы, вписывание и запись PNG
"""

from .trimmer import (
    trim_transparent,
    pad_transparent,
    fit_contain,
    trim_ad_card,
    trim_tight,
    parse_heights,
)

__all__ = [
    "trim_transparent",
    "pad_transparent",
    "fit_contain",
    "trim_ad_card",
    "trim_tight",
    "parse_heights",
]
