from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator


class EngineSettings(BaseModel):
    experience: Literal["novice", "intermediate", "advanced"] = "intermediate"
    default_weight_increment: float = Field(default=2.5, gt=0)
    deload_lookback: Optional[int] = Field(default=None, ge=6)
    landmarks: dict[str, tuple[int, int, int]] = Field(default_factory=dict)

    @field_validator("landmarks")
    @classmethod
    def _check_landmarks(
        cls, value: dict[str, tuple[int, int, int]]
    ) -> dict[str, tuple[int, int, int]]:
        for muscle, (mev, mav, mrv) in value.items():
            if not (0 <= mev <= mav <= mrv and mrv > 0):
                raise ValueError(f"invalid landmarks for {muscle}: {(mev, mav, mrv)}")
        return value


def validate_settings(data: dict) -> EngineSettings:
    try:
        return EngineSettings(**data)
    except ValidationError as e:
        raise ValueError(str(e))
