"""
Модуль реестра оборудования (Equipment Registry).

Отвечает за регистрацию карточек оборудования и их изменение
владельцем.
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
