"""
Share — Модели долей секрета

Immutable Pydantic модели:
- ShareMetadata         — блок "keys" документа (n, k)
- ShareEntry            — сырая запись доли ("base", "value")
- SharePoint            — декодированная точка (x, y)
- ReconstructionRequest — n, k и все распознанные точки, отсортированные по x
"""

from typing import Any

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator

from shamir_recover.core.math.base_decoding import format_decimal


# =============================================================================
# DOCUMENT MODELS
# =============================================================================


class ShareMetadata(BaseModel):
    """
    Метаданные документа: общее число долей n и порог k.

    Типы строгие: "3" или 3.0 не принимаются.
    """

    n: StrictInt = Field(..., ge=1, description="Общее число долей")
    k: StrictInt = Field(..., ge=1, description="Порог восстановления")

    model_config = {"frozen": True}


class ShareEntry(BaseModel):
    """
    Сырая запись доли.

    base хранится как есть: приведение к int и проверка диапазона выполняются
    coerce_base() вне Pydantic, чтобы любое недопустимое основание давало
    InvalidBase, а не ValidationError.
    """

    base: Any = Field(..., description="Основание системы счисления значения")
    value: StrictStr = Field(..., description="Цифры значения y")

    model_config = {"frozen": True}


# =============================================================================
# POINTS
# =============================================================================


class SharePoint(BaseModel):
    """Точка (x, y) на полиноме; y — неотрицательное целое любой величины."""

    x: StrictInt
    y: StrictInt

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"({format_decimal(self.x)}, {format_decimal(self.y)})"


class ReconstructionRequest(BaseModel):
    """
    Запрос на восстановление секрета.

    points — все распознанные точки в порядке возрастания x.
    Соотношение k <= n не проверяется: осуществимость определяется числом
    доступных точек, а не объявленным n.
    """

    n: int = Field(..., ge=1)
    k: int = Field(..., ge=1)
    points: tuple[SharePoint, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @field_validator("points")
    @classmethod
    def validate_sorted(cls, v: tuple[SharePoint, ...]) -> tuple[SharePoint, ...]:
        """Точки должны идти по неубыванию x"""
        for prev, cur in zip(v, v[1:]):
            if cur.x < prev.x:
                raise ValueError(f"points must be sorted by x: {prev.x} before {cur.x}")
        return v

    @property
    def selected(self) -> tuple[SharePoint, ...]:
        """Первые k точек после сортировки."""
        return self.points[: self.k]

    @property
    def share_count(self) -> int:
        return len(self.points)
