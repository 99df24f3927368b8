"""
Настройки маркетплейса. Любое поле можно переопределить переменной
окружения с префиксом EQUIPMENT_SHARING_ или через файл .env.
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки приложения."""

    model_config = SettingsConfigDict(
        env_prefix="EQUIPMENT_SHARING_",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Допустимый диапазон оценки в отзыве
    min_rating: int = Field(1, ge=0)
    max_rating: int = Field(5, ge=1)

    # complete/cancel из completed или cancelled дают InvalidState
    enforce_terminal_states: bool = True
    # Не больше одного отзыва на бронирование
    one_review_per_booking: bool = True

    initial_logical_time: int = Field(0, ge=0)

    @model_validator(mode="after")
    def check_rating_bounds(self) -> "Settings":
        if self.min_rating > self.max_rating:
            raise ValueError("min_rating не может быть больше max_rating")
        return self
