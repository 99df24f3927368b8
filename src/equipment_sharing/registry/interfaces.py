"""
Интерфейсы (порты) для реестра оборудования.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from ..shared_kernel import EntityId, Principal
from .domain import Equipment


class IEquipmentRepository(Protocol):
    """Интерфейс репозитория для оборудования."""

    def next_id(self) -> EntityId: ...
    def add(self, equipment: Equipment) -> None: ...
    def get_by_id(self, equipment_id: EntityId) -> Optional[Equipment]: ...
    def update(self, equipment: Equipment) -> None: ...
    def find_by_owner(self, owner: Principal) -> List[Equipment]: ...
