"""
Fraction — Exact Rational Arithmetic

Неизменяемая рациональная дробь из двух целых произвольной точности.
Используется для интерполяции Лагранжа, где float молча портит большие секреты.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0
2. gcd(|numerator|, denominator) == 1 (дробь всегда несократима)
3. Нулевой знаменатель при построении → DivisionByZero
4. Ноль всегда представлен как (0, 1)
5. Ни одна операция не переходит во float; результат каждой операции —
   новый нормализованный экземпляр
"""

import math
from decimal import Decimal, localcontext

from shamir_recover.core.errors import DivisionByZero
from shamir_recover.core.math.base_decoding import format_decimal


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def _normalize(numerator: int, denominator: int) -> tuple[int, int]:
    """Знак переносится в числитель, затем сокращение на gcd."""
    if denominator == 0:
        raise DivisionByZero("Division by zero in Fraction")

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    # gcd(0, d) == d → (0, 1)
    g = math.gcd(numerator, denominator)
    return numerator // g, denominator // g


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Fraction {name} must be int, got {type(value).__name__}")
    return value


# =============================================================================
# FRACTION
# =============================================================================


class Fraction:
    """
    Точная рациональная дробь numerator/denominator.

    Examples:
        >>> str(Fraction(6, -4))
        '-3/2'
        >>> str(Fraction(0, 5))
        '0'
        >>> Fraction(1, 3).add(Fraction(2, 3)).is_integer()
        True
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1):
        n = _require_int(numerator, "numerator")
        d = _require_int(denominator, "denominator")
        self._numerator, self._denominator = _normalize(n, d)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def __setattr__(self, name, value):
        if hasattr(self, "_denominator"):
            raise AttributeError("Fraction is immutable")
        object.__setattr__(self, name, value)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Fraction") -> "Fraction":
        return Fraction(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def sub(self, other: "Fraction") -> "Fraction":
        return Fraction(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def mul(self, other: "Fraction") -> "Fraction":
        return Fraction(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def div(self, other: "Fraction") -> "Fraction":
        """
        Деление на дробь.

        Raises:
            DivisionByZero: если other == 0
        """
        if other._numerator == 0:
            raise DivisionByZero("Division by zero in Fraction.div")
        return Fraction(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def neg(self) -> "Fraction":
        return Fraction(-self._numerator, self._denominator)

    # Операторы принимают Fraction или int
    def __add__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.sub(other)

    def __rsub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.sub(self)

    def __mul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.mul(other)

    def __rmul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.mul(self)

    def __truediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.div(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.div(self)

    def __neg__(self) -> "Fraction":
        return self.neg()

    # -------------------------------------------------------------------------
    # Сравнение и представление
    # -------------------------------------------------------------------------

    def is_integer(self) -> bool:
        return self._denominator == 1

    def __eq__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        # Обе дроби нормализованы, поэтому достаточно покомпонентного сравнения
        return (
            self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __hash__(self) -> int:
        # Fraction(n) == n, значит и hash(Fraction(n)) == hash(n)
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __str__(self) -> str:
        if self.is_integer():
            return format_decimal(self._numerator)
        return f"{format_decimal(self._numerator)}/{format_decimal(self._denominator)}"

    def __repr__(self) -> str:
        return (
            f"Fraction({format_decimal(self._numerator)}, "
            f"{format_decimal(self._denominator)})"
        )

    def to_decimal(self, precision: int) -> Decimal:
        """
        Приближённое десятичное значение (только для отображения).

        Decimal строится из точных int, поэтому переполнения float
        не возникает при любой величине числителя/знаменателя.

        Args:
            precision: Число значащих цифр (>= 1)

        Examples:
            >>> Fraction(1, 3).to_decimal(5)
            Decimal('0.33333')
        """
        if precision < 1:
            raise ValueError(f"precision must be positive, got {precision}")

        with localcontext() as ctx:
            ctx.prec = precision
            return Decimal(self._numerator) / Decimal(self._denominator)


def _coerce(value: object) -> Fraction | None:
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Fraction(value)
    return None


ZERO = Fraction(0)
