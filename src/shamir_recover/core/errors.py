"""
Errors — иерархия ошибок восстановления секрета

Все ошибки поднимаются в точке обнаружения и без изменений доходят до
верхнего уровня (CLI). Локального восстановления или повторов нет:
вычисление детерминировано, любое обнаруженное несоответствие фатально.

Иерархия:
- ReconstructionError — базовый класс
  - InvalidBase        — основание вне диапазона 2..36
  - InvalidDigit       — символ недопустим для заданного основания
  - MalformedInput     — структура документа нарушена
  - InsufficientPoints — точек меньше порога k
  - DivisionByZero     — нулевой знаменатель / дублирующиеся x
"""


# =============================================================================
# BASE
# =============================================================================


class ReconstructionError(Exception):
    """Базовая ошибка восстановления секрета."""

    pass


# =============================================================================
# DECODING
# =============================================================================


class InvalidBase(ReconstructionError, ValueError):
    """Основание системы счисления не целое или вне диапазона [2, 36]."""

    def __init__(self, base: object):
        self.base = base
        super().__init__(f"Unsupported base: {base!r} (expected integer in 2..36)")


class InvalidDigit(ReconstructionError, ValueError):
    """Символ не входит в алфавит первых `base` цифр."""

    def __init__(self, digit: str, value: str, base: int):
        self.digit = digit
        self.value = value
        self.base = base
        super().__init__(f"Invalid digit '{digit}' for base {base} in value '{value}'")


# =============================================================================
# DOCUMENT / RECONSTRUCTION
# =============================================================================


class MalformedInput(ReconstructionError, ValueError):
    """Документ с долями не соответствует ожидаемой структуре."""

    pass


class InsufficientPoints(ReconstructionError):
    """Число пригодных точек меньше порога k."""

    def __init__(self, available: int, required: int):
        self.available = available
        self.required = required
        super().__init__(
            f"Not enough points to interpolate: have {available}, need {required}"
        )


class DivisionByZero(ReconstructionError, ZeroDivisionError):
    """
    Деление на ноль в точной рациональной арифметике.

    Возникает при построении Fraction с нулевым знаменателем или при делении
    на нулевую дробь (в интерполяции это означает дублирующиеся x).
    """

    pass
