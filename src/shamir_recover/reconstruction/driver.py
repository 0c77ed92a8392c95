"""Reconstruction Driver — документ → секрет f(0).

Оркестрация:
1. extract(): документ → ReconstructionRequest (отсортированные точки)
2. Проверка осуществимости: точек >= k, иначе InsufficientPoints
3. interpolate_at_zero() на первых k точках
4. ReconstructionResult + рендеринг (text / json)

Десятичное приближение вычисляется только для дробного секрета и носит
справочный характер: авторитетное значение — точная дробь.
"""

import json
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from shamir_recover.config import ReconstructionConfig
from shamir_recover.core.domain.share import SharePoint
from shamir_recover.core.errors import InsufficientPoints
from shamir_recover.core.math.base_decoding import format_decimal
from shamir_recover.core.math.fraction import Fraction
from shamir_recover.core.math.lagrange import interpolate_at_zero
from shamir_recover.extraction.points import Reporter, extract

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReconstructionResult:
    """Результат восстановления секрета."""

    k: int
    n: int
    points: tuple[SharePoint, ...]
    secret: Fraction

    # Число распознанных долей в документе (может отличаться от n)
    share_count: int

    # Только для дробного секрета
    approximation: Optional[Decimal] = None

    @property
    def is_integer(self) -> bool:
        return self.secret.is_integer()


def reconstruct(
    document: Any,
    reporter: Optional[Reporter] = None,
    config: Optional[ReconstructionConfig] = None,
) -> ReconstructionResult:
    """Восстановление секрета из документа с долями.

    Args:
        document: Загруженный JSON документ
        reporter: Получатель предупреждений (default: logger.warning в extract)
        config: Параметры восстановления

    Returns:
        ReconstructionResult

    Raises:
        MalformedInput, InvalidBase, InvalidDigit: из extract()
        InsufficientPoints: если распознанных точек меньше k
        DivisionByZero: если среди выбранных точек есть одинаковые x
    """
    config = config or ReconstructionConfig()

    request = extract(document, reporter=reporter, config=config)
    if request.share_count < request.k:
        raise InsufficientPoints(available=request.share_count, required=request.k)

    selected = request.selected
    logger.debug("Interpolating at zero over %d of %d points", len(selected), request.share_count)

    secret = interpolate_at_zero(selected)

    approximation = None
    if not secret.is_integer():
        approximation = secret.to_decimal(config.approximation_digits)

    return ReconstructionResult(
        k=request.k,
        n=request.n,
        points=selected,
        secret=secret,
        share_count=request.share_count,
        approximation=approximation,
    )


# =============================================================================
# RENDERING
# =============================================================================


def render_text(result: ReconstructionResult) -> str:
    """Человекочитаемый вывод.

    Пример вывода:
        k = 3
        selected points = (1, 10), (2, 14), (3, 18)
        secret f(0) = 6
    """
    lines = [
        f"k = {result.k}",
        "selected points = " + ", ".join(str(p) for p in result.points),
        f"secret f(0) = {result.secret}",
    ]
    if result.approximation is not None:
        lines.append(f"approx ≈ {result.approximation}")
    return "\n".join(lines)


def render_json(result: ReconstructionResult) -> str:
    """Машиночитаемый вывод; большие целые — десятичными строками."""
    payload = {
        "k": result.k,
        "n": result.n,
        "share_count": result.share_count,
        "points": [
            {"x": format_decimal(p.x), "y": format_decimal(p.y)} for p in result.points
        ],
        "secret": str(result.secret),
        "is_integer": result.is_integer,
        "approximation": (
            str(result.approximation) if result.approximation is not None else None
        ),
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)
