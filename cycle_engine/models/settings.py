"""
Settings model definition for per-user cycle configuration.
"""
from pydantic import BaseModel, ConfigDict, Field, model_validator

from cycle_engine.services.constants import DEFAULT_CYCLE_LENGTH, DEFAULT_PERIOD_LENGTH

class CycleSettings(BaseModel):
    """
    User-configured averages the engine projects with.
    """
    model_config = ConfigDict(frozen=True)

    cycle_length: int = Field(DEFAULT_CYCLE_LENGTH, gt=0)
    period_length: int = Field(DEFAULT_PERIOD_LENGTH, gt=0)
    is_pregnancy_mode: bool = False

    @model_validator(mode="after")
    def check_period_shorter_than_cycle(self) -> "CycleSettings":
        if self.period_length >= self.cycle_length:
            raise ValueError("period_length must be shorter than cycle_length")
        return self
