"""
Lagrange Interpolation at Zero

Восстановление свободного члена полинома f(0) по k точкам (схема Шамира):

    f(0) = Σ_i y_i · Π_{j≠i} (−x_j) / (x_i − x_j)

Вся арифметика — точные дроби (Fraction). Числитель и знаменатель растут
примерно как произведение всех попарных разностей x, поэтому float здесь
недопустим. Сложность O(k²) умножений дробей; k мало (порог).

Дублирующиеся x → DivisionByZero из Fraction.div.
"""

from typing import Sequence

from shamir_recover.core.domain.share import SharePoint
from shamir_recover.core.errors import InsufficientPoints
from shamir_recover.core.math.fraction import ZERO, Fraction


def interpolate_at_zero(points: Sequence[SharePoint]) -> Fraction:
    """
    Точное значение интерполяционного полинома в x = 0.

    Args:
        points: Точки (x, y); порядок не влияет на результат

    Returns:
        f(0) как несократимая дробь (знаменатель 1, если секрет целый)

    Raises:
        InsufficientPoints: если points пуст
        DivisionByZero: если среди points есть одинаковые x

    Examples:
        >>> pts = [SharePoint(x=1, y=10), SharePoint(x=2, y=16)]
        >>> str(interpolate_at_zero(pts))
        '4'
    """
    if not points:
        raise InsufficientPoints(available=0, required=1)

    secret = ZERO
    for i, pi in enumerate(points):
        term = Fraction(pi.y)
        for j, pj in enumerate(points):
            if i == j:
                continue
            # term *= (0 - x_j) / (x_i - x_j)
            term = term.mul(Fraction(-pj.x).div(Fraction(pi.x - pj.x)))
        secret = secret.add(term)

    return secret
