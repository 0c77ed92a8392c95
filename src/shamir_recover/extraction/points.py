"""Point Extraction & Selection — документ → ReconstructionRequest.

Порядок обработки:
1. Контракт share_document (jsonschema): блок "keys" с целыми n, k >= 1
2. "keys" → ShareMetadata (Pydantic, строгие int)
3. Каждое другое поле верхнего уровня — кандидат в доли:
   - не объект, или нет "base"/"value" → молча пропускается
   - ключ → x (десятичное целое), значение → ShareEntry → y = decode(value, base)
4. Число распознанных долей != n → предупреждение (не ошибка)
5. Сортировка по x (при равных x — по исходному тексту ключа), выбор первых k

Результат не зависит от порядка полей во входном документе.
"""

import logging
import re
from typing import Any, Callable, Mapping, Optional

from pydantic import ValidationError

from shamir_recover.config import METADATA_KEY, ReconstructionConfig
from shamir_recover.core.contracts import validate_share_document
from shamir_recover.core.domain.share import (
    ReconstructionRequest,
    ShareEntry,
    ShareMetadata,
    SharePoint,
)
from shamir_recover.core.errors import MalformedInput
from shamir_recover.core.math.base_decoding import coerce_base, decode

logger = logging.getLogger(__name__)

# Получатель нефатальных предупреждений (по умолчанию — logger.warning)
Reporter = Callable[[str], None]

_X_COORDINATE = re.compile(r"-?[0-9]+")


def parse_x_coordinate(key: str) -> int:
    """
    Ключ записи доли → x-координата.

    Raises:
        MalformedInput: если ключ не десятичное целое

    Examples:
        >>> parse_x_coordinate("12")
        12
        >>> parse_x_coordinate(" 007 ")
        7
    """
    text = key.strip()
    if not _X_COORDINATE.fullmatch(text):
        raise MalformedInput(f"Share key {key!r} is not a decimal x-coordinate")

    # decode() не ограничен числом цифр, в отличие от int(str)
    if text.startswith("-"):
        return -decode(text[1:], 10)
    return decode(text, 10)


def _is_share_entry(raw: Any) -> bool:
    return isinstance(raw, Mapping) and "base" in raw and "value" in raw


def _parse_metadata(document: Mapping[str, Any]) -> ShareMetadata:
    try:
        return ShareMetadata.model_validate(document[METADATA_KEY])
    except ValidationError as e:
        raise MalformedInput(f"Invalid '{METADATA_KEY}' block: {e}") from e


def _parse_point(key: str, raw: Mapping[str, Any]) -> SharePoint:
    x = parse_x_coordinate(key)
    try:
        entry = ShareEntry.model_validate(raw)
    except ValidationError as e:
        raise MalformedInput(f"Invalid share entry {key!r}: {e}") from e

    # InvalidBase / InvalidDigit поднимаются без изменений
    y = decode(entry.value, coerce_base(entry.base))
    return SharePoint(x=x, y=y)


def extract(
    document: Any,
    reporter: Optional[Reporter] = None,
    config: Optional[ReconstructionConfig] = None,
) -> ReconstructionRequest:
    """
    Разбор документа с долями.

    Args:
        document: Загруженный JSON документ (ожидается dict)
        reporter: Получатель предупреждений (default: logger.warning)
        config: Параметры (default: ReconstructionConfig())

    Returns:
        ReconstructionRequest со всеми распознанными точками по возрастанию x;
        request.selected — первые k из них

    Raises:
        MalformedInput: структура документа, ключ или запись доли невалидны
        InvalidBase: основание записи не целое или вне 2..36
        InvalidDigit: символ значения недопустим для основания
    """
    report = reporter or logger.warning
    config = config or ReconstructionConfig()

    validate_share_document(document)
    metadata = _parse_metadata(document)

    keyed_points: list[tuple[int, str, SharePoint]] = []
    for key, raw in document.items():
        if key == METADATA_KEY:
            continue
        if not _is_share_entry(raw):
            logger.debug("Skipping non-share entry %r", key)
            continue
        point = _parse_point(key, raw)
        keyed_points.append((point.x, key, point))

    if len(keyed_points) != metadata.n:
        message = (
            f"{METADATA_KEY}.n = {metadata.n} but found "
            f"{len(keyed_points)} points in document"
        )
        if config.strict_count:
            raise MalformedInput(message)
        report(message)

    keyed_points.sort(key=lambda item: (item[0], item[1]))

    return ReconstructionRequest(
        n=metadata.n,
        k=metadata.k,
        points=tuple(point for _, _, point in keyed_points),
    )
