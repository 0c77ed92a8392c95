"""Конфигурация восстановления секрета."""

from dataclasses import dataclass
from typing import Final

# Значащие цифры десятичного приближения дробного секрета
APPROXIMATION_DIGITS_DEFAULT: Final[int] = 20

# Ключ блока метаданных в документе
METADATA_KEY: Final[str] = "keys"


@dataclass(frozen=True)
class ReconstructionConfig:
    """Параметры восстановления.

    - approximation_digits: точность справочного Decimal-приближения
      (используется только когда секрет не целый)
    - strict_count: если True, расхождение объявленного n с числом
      распознанных долей — ошибка MalformedInput, иначе только предупреждение
    """
    approximation_digits: int = APPROXIMATION_DIGITS_DEFAULT
    strict_count: bool = False

    def __post_init__(self):
        if self.approximation_digits < 1:
            raise ValueError(
                f"approximation_digits must be positive, got {self.approximation_digits}"
            )
