"""
Модуль контекста бронирования (Booking Context).

Отвечает за бронирование оборудования, включая:
- Создание бронирования и расчет стоимости
- Подтверждение, завершение и отмену
- Проверку прав участников на каждый переход статуса
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
