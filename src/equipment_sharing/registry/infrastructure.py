"""
Инфраструктурный слой реестра оборудования.
"""

from typing import Dict, List, Optional

from ..shared_kernel import EntityId, Principal, UnitOfWork
from ..shared_kernel import interfaces as kernel_ports
from . import interfaces as ports
from .domain import Equipment


class InMemoryEquipmentRepository(ports.IEquipmentRepository):
    """Реализация репозитория оборудования в памяти."""

    def __init__(self):
        self._equipment: Dict[EntityId, Equipment] = {}
        self._last_id = 0

    def next_id(self) -> EntityId:
        # Счетчик сдвигается только в add, поэтому неудачная операция id не тратит
        return self._last_id + 1

    def add(self, equipment: Equipment) -> None:
        if equipment.id != self.next_id():
            raise ValueError(
                f"Ожидался id {self.next_id()}, получен {equipment.id}"
            )
        self._equipment[equipment.id] = equipment
        self._last_id = equipment.id

    def get_by_id(self, equipment_id: EntityId) -> Optional[Equipment]:
        return self._equipment.get(equipment_id)

    def update(self, equipment: Equipment) -> None:
        if equipment.id not in self._equipment:
            raise KeyError(f"Equipment with id {equipment.id} not found")
        self._equipment[equipment.id] = equipment

    def find_by_owner(self, owner: Principal) -> List[Equipment]:
        return [item for item in self._equipment.values() if item.owner == owner]


class RegistryUnitOfWork(UnitOfWork):
    """Единица работы для реестра оборудования."""

    def __init__(
        self,
        equipment_repo: Optional[ports.IEquipmentRepository] = None,
        event_bus: Optional[kernel_ports.IEventBus] = None,
        logger: Optional[kernel_ports.ILogger] = None,
    ):
        super().__init__(event_bus=event_bus, logger=logger)
        self._equipment = (
            equipment_repo if equipment_repo is not None else InMemoryEquipmentRepository()
        )

    @property
    def equipment(self) -> ports.IEquipmentRepository:
        return self._equipment
