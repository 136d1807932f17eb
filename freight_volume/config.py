from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .units import Unit


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FREIGHT_VOLUME_",
        extra="ignore",
    )

    # Input
    DEFAULT_UNIT: Unit = Unit.CENTIMETERS

    # Loading meters. 2.4 m is the interior width of a standard trailer
    DEFAULT_QUANTITY: int = Field(1, ge=1)
    DEFAULT_STACKING_FACTOR: float = Field(1.0, gt=0)
    DEFAULT_TRUCK_WIDTH_M: float = Field(2.4, gt=0)

    # Formatting
    FORMAT_DECIMALS: int = Field(2, ge=0)
    FORMAT_DECIMAL_POINT: str = "."
    FORMAT_THOUSANDS_SEPARATOR: str = ","

    @field_validator("DEFAULT_UNIT", mode="before")
    @classmethod
    def _coerce_unit(cls, value):
        return Unit.coerce(value)


settings = Settings()
