"""
IntegrationRequest — Модель запроса на численное интегрирование

Immutable Pydantic модель: (integrand, lower, upper, steps).
Создаётся на каждый вызов квадратуры и не сохраняется.

Инварианты проверяются при создании, до начала вычислений:
- lower, upper конечны и lower <= upper  → иначе InvalidBounds
- steps > 0 и чётный                     → иначе InvalidStepCount

Чётность steps обязательна и для трапеций (математически не требуется):
оба правила принимают один и тот же входной контракт и одну и ту же
сгенерированную последовательность.
"""

from collections.abc import Callable

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from numeris.core.errors import InvalidBounds, InvalidStepCount
from numeris.core.float32 import f32, is_valid_float, round_f32, validate_step_count


# =============================================================================
# INTEGRATION REQUEST MODEL
# =============================================================================


class IntegrationRequest(BaseModel):
    """
    Запрос на вычисление определённого интеграла.

    Границы хранятся уже округлёнными до float32, поэтому сравнение
    lower > upper выполняется в той же точности, что и сами вычисления.
    """

    integrand: Callable[[float], float] = Field(
        ..., description="Чистая скалярная функция f(x) -> float"
    )
    lower: float = Field(..., description="Нижняя граница интегрирования")
    upper: float = Field(..., description="Верхняя граница интегрирования")
    steps: int = Field(..., description="Количество интервалов (чётное, > 0)")

    model_config = {"frozen": True}  # Immutable

    # Pydantic валидирует поля в порядке объявления: lower, upper, steps.
    # Поэтому InvalidBounds всегда проверяется раньше InvalidStepCount.

    @field_validator("lower", "upper")
    @classmethod
    def round_bound_to_float32(cls, v: float, info: ValidationInfo) -> float:
        """
        Округление границы до float32 и проверка границ.

        Raises:
            InvalidBounds: Если граница NaN/Inf (в том числе после округления)
                или lower > upper
        """
        rounded = round_f32(v)
        if not is_valid_float(rounded):
            raise InvalidBounds(
                f"{info.field_name} must be a finite float32 value, got {v}"
            )

        lower = info.data.get("lower")
        if info.field_name == "upper" and lower is not None and lower > rounded:
            raise InvalidBounds(
                f"Upper bound must be greater than lower bound: "
                f"lower={lower}, upper={rounded}"
            )

        return rounded

    @field_validator("steps", mode="before")
    @classmethod
    def validate_steps(cls, v: int) -> int:
        """
        steps: целое (int или numpy integer), > 0 и чётное.

        Raises:
            InvalidStepCount: Если steps не целое, не положительное или нечётное
        """
        validate_step_count(v)

        if v % 2 != 0:
            raise InvalidStepCount(f"steps must be an even number, got {v}")

        return int(v)

    @property
    def width(self) -> float:
        """Ширина интервала upper - lower (float32)."""
        return float(f32(self.upper) - f32(self.lower))
