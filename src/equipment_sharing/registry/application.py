"""
Прикладной слой реестра оборудования.
"""

from typing import List, Optional

from ..shared_kernel import (
    DomainException,
    EntityId,
    IClock,
    LogicalClock,
    LoguruLogger,
    NotFoundException,
    Principal,
)
from ..shared_kernel import interfaces as kernel_ports
from .domain import Equipment, EquipmentDetails
from .infrastructure import RegistryUnitOfWork


class EquipmentRegistryService:
    """Сервис приложения для работы с оборудованием."""

    def __init__(
        self,
        uow: RegistryUnitOfWork,
        clock: Optional[IClock] = None,
        logger: Optional[kernel_ports.ILogger] = None,
    ):
        self._uow = uow
        self._clock = clock or LogicalClock()
        self._logger = logger or LoguruLogger("registry")

    @property
    def uow(self) -> RegistryUnitOfWork:
        return self._uow

    def register(
        self,
        owner: Principal,
        name: str,
        equipment_type: str,
        description: str,
        location: str,
        hourly_rate: int,
        availability: str,
        maintenance_status: str,
    ) -> EntityId:
        """Регистрирует оборудование от имени вызывающего."""
        details = EquipmentDetails(
            name=name,
            equipment_type=equipment_type,
            description=description,
            location=location,
            hourly_rate=hourly_rate,
            availability=availability,
            maintenance_status=maintenance_status,
        )
        try:
            with self._uow:
                equipment = Equipment.register(
                    equipment_id=self._uow.equipment.next_id(),
                    owner=owner,
                    details=details,
                    now=self._clock.now(),
                )
                self._uow.equipment.add(equipment)
                self._uow.collect(equipment.pull_domain_events())
        except DomainException as e:
            self._logger.warning(f"Регистрация оборудования отклонена: {e}", owner=owner)
            raise

        self._logger.info(
            "Оборудование зарегистрировано", equipment_id=equipment.id, owner=owner
        )
        return equipment.id

    def update(
        self,
        caller: Principal,
        equipment_id: EntityId,
        name: str,
        equipment_type: str,
        description: str,
        location: str,
        hourly_rate: int,
        availability: str,
        maintenance_status: str,
    ) -> EntityId:
        """Обновляет карточку. Доступно только владельцу."""
        details = EquipmentDetails(
            name=name,
            equipment_type=equipment_type,
            description=description,
            location=location,
            hourly_rate=hourly_rate,
            availability=availability,
            maintenance_status=maintenance_status,
        )
        try:
            with self._uow:
                equipment = self._uow.equipment.get_by_id(equipment_id)
                if equipment is None:
                    raise NotFoundException("Оборудование", equipment_id)

                equipment.update_details(caller, details, now=self._clock.now())
                self._uow.equipment.update(equipment)
                self._uow.collect(equipment.pull_domain_events())
        except DomainException as e:
            self._logger.warning(
                f"Изменение оборудования отклонено: {e}",
                equipment_id=equipment_id,
                caller=caller,
            )
            raise

        self._logger.info("Оборудование обновлено", equipment_id=equipment_id)
        return equipment_id

    def get(self, equipment_id: EntityId) -> Optional[Equipment]:
        """Возвращает снимок карточки или None."""
        equipment = self._uow.equipment.get_by_id(equipment_id)
        return equipment.model_copy(deep=True) if equipment is not None else None

    def list_by_owner(self, owner: Principal) -> List[Equipment]:
        return [
            item.model_copy(deep=True)
            for item in self._uow.equipment.find_by_owner(owner)
        ]
