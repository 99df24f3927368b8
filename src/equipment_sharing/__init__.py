"""
Маркетплейс аренды оборудования.

Владельцы регистрируют оборудование, арендаторы бронируют интервалы,
стороны проводят бронирование по жизненному циклу, а после завершения
арендатор оставляет отзыв.
"""

from .bootstrap import Marketplace, bootstrap_app
from .config import Settings

__all__ = [
    "Marketplace",
    "Settings",
    "bootstrap_app",
]
