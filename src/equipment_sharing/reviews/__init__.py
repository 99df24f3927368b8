"""
Модуль журнала отзывов (Review Ledger).

Принимает отзывы арендаторов по завершенным бронированиям.
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
