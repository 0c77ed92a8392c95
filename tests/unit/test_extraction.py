"""Unit тесты для Point Extraction & Selection.

Coverage:
- Декодирование и сортировка точек
- Выбор первых k точек
- Пропуск записей без base/value
- Предупреждение при расхождении n (и strict_count)
- Детерминизм при перестановке полей документа
- MalformedInput / InvalidBase / InvalidDigit
"""

import logging
import random

import pytest

from shamir_recover.config import ReconstructionConfig
from shamir_recover.core.domain.share import SharePoint
from shamir_recover.core.errors import InvalidBase, InvalidDigit, MalformedInput
from shamir_recover.extraction.points import extract, parse_x_coordinate


@pytest.fixture
def warnings_sink():
    """Собирает предупреждения вместо логирования."""
    return []


# =============================================================================
# PARSING & SELECTION
# =============================================================================


def test_extract_linear_document(linear_document, warnings_sink):
    """Все четыре доли распознаны, выбраны первые три по x."""
    request = extract(linear_document, reporter=warnings_sink.append)

    assert request.n == 4
    assert request.k == 3
    assert request.share_count == 4
    assert request.selected == (
        SharePoint(x=1, y=10),
        SharePoint(x=2, y=14),
        SharePoint(x=3, y=18),
    )
    assert warnings_sink == []


def test_extract_sorts_by_numeric_x(warnings_sink):
    """Сортировка численная, а не лексикографическая: 2 < 10."""
    document = {
        "keys": {"n": 3, "k": 2},
        "10": {"base": "10", "value": "1"},
        "2": {"base": "10", "value": "2"},
        "1": {"base": "10", "value": "3"},
    }
    request = extract(document, reporter=warnings_sink.append)

    assert [p.x for p in request.points] == [1, 2, 10]
    assert [p.x for p in request.selected] == [1, 2]


def test_base_as_integer_or_numeric_string(warnings_sink):
    document = {
        "keys": {"n": 2, "k": 2},
        "1": {"base": 16, "value": "ff"},
        "2": {"base": "16", "value": "FF"},
    }
    request = extract(document, reporter=warnings_sink.append)
    assert [p.y for p in request.points] == [255, 255]


def test_selected_shorter_than_k_when_few_points(warnings_sink):
    """extract не отклоняет нехватку точек — это делает driver."""
    document = {
        "keys": {"n": 2, "k": 3},
        "1": {"base": "10", "value": "5"},
        "2": {"base": "10", "value": "6"},
    }
    request = extract(document, reporter=warnings_sink.append)
    assert len(request.selected) == 2


# =============================================================================
# SKIPPED ENTRIES & WARNINGS
# =============================================================================


def test_entries_without_base_or_value_skipped(warnings_sink):
    document = {
        "keys": {"n": 2, "k": 2},
        "1": {"base": "10", "value": "5"},
        "2": {"value": "6"},
        "3": {"base": "10"},
        "4": "not an object",
        "note": None,
        "5": {"base": "10", "value": "9"},
    }
    request = extract(document, reporter=warnings_sink.append)

    assert [p.x for p in request.points] == [1, 5]
    assert warnings_sink == []


def test_count_mismatch_warns_but_continues(warnings_sink):
    document = {
        "keys": {"n": 5, "k": 2},
        "1": {"base": "10", "value": "5"},
        "2": {"base": "10", "value": "6"},
    }
    request = extract(document, reporter=warnings_sink.append)

    assert request.share_count == 2
    assert warnings_sink == ["keys.n = 5 but found 2 points in document"]


def test_count_mismatch_default_reporter_logs(caplog):
    document = {
        "keys": {"n": 1, "k": 1},
        "1": {"base": "10", "value": "5"},
        "2": {"base": "10", "value": "6"},
    }
    with caplog.at_level(logging.WARNING, logger="shamir_recover"):
        extract(document)

    assert "keys.n = 1 but found 2 points" in caplog.text


def test_count_mismatch_strict_raises(warnings_sink):
    document = {
        "keys": {"n": 3, "k": 1},
        "1": {"base": "10", "value": "5"},
    }
    with pytest.raises(MalformedInput, match="keys.n = 3 but found 1"):
        extract(
            document,
            reporter=warnings_sink.append,
            config=ReconstructionConfig(strict_count=True),
        )
    assert warnings_sink == []


# =============================================================================
# DETERMINISM
# =============================================================================


def test_shuffled_document_yields_same_selection(quadratic_document, warnings_sink):
    """Порядок полей в документе не влияет на выбранные точки."""
    baseline = extract(quadratic_document, reporter=warnings_sink.append)

    rng = random.Random(1234)
    items = list(quadratic_document.items())
    for _ in range(20):
        rng.shuffle(items)
        shuffled = dict(items)
        request = extract(shuffled, reporter=warnings_sink.append)
        assert request.points == baseline.points
        assert request.selected == baseline.selected


def test_equal_x_ordered_by_key_text(warnings_sink):
    """Ключи "1" и "01" дают одинаковый x; порядок фиксируется текстом ключа."""
    forward = {
        "keys": {"n": 2, "k": 2},
        "1": {"base": "10", "value": "7"},
        "01": {"base": "10", "value": "8"},
    }
    backward = {
        "keys": {"n": 2, "k": 2},
        "01": {"base": "10", "value": "8"},
        "1": {"base": "10", "value": "7"},
    }
    assert extract(forward, reporter=warnings_sink.append).points == extract(
        backward, reporter=warnings_sink.append
    ).points


# =============================================================================
# ERRORS
# =============================================================================


@pytest.mark.parametrize(
    "document",
    [
        {},
        [],
        "keys",
        {"keys": {"n": 3}},
        {"keys": {"k": 3}},
        {"keys": {"n": "3", "k": 2}},
        {"keys": {"n": 3, "k": 2.5}},
        {"keys": {"n": 0, "k": 1}},
        {"keys": {"n": 3, "k": True}},
        {"keys": []},
    ],
)
def test_malformed_metadata(document, warnings_sink):
    with pytest.raises(MalformedInput):
        extract(document, reporter=warnings_sink.append)


def test_non_decimal_key_rejected(warnings_sink):
    document = {
        "keys": {"n": 1, "k": 1},
        "x1": {"base": "10", "value": "5"},
    }
    with pytest.raises(MalformedInput, match="not a decimal x-coordinate"):
        extract(document, reporter=warnings_sink.append)


@pytest.mark.parametrize("base", ["hex", 16.5, None, True, [16]])
def test_non_integer_base_raises_invalid_base(base, warnings_sink):
    """Основание, которое нельзя привести к целому, — InvalidBase, а не MalformedInput."""
    document = {
        "keys": {"n": 1, "k": 1},
        "1": {"base": base, "value": "5"},
    }
    with pytest.raises(InvalidBase, match="Unsupported base") as excinfo:
        extract(document, reporter=warnings_sink.append)
    assert excinfo.value.base == base


@pytest.mark.parametrize("base", [16, "16", " 16 ", 16.0])
def test_integer_like_base_accepted(base, warnings_sink):
    document = {
        "keys": {"n": 1, "k": 1},
        "1": {"base": base, "value": "ff"},
    }
    request = extract(document, reporter=warnings_sink.append)
    assert request.points == (SharePoint(x=1, y=255),)


def test_non_string_value_rejected(warnings_sink):
    document = {
        "keys": {"n": 1, "k": 1},
        "1": {"base": "10", "value": 5},
    }
    with pytest.raises(MalformedInput):
        extract(document, reporter=warnings_sink.append)


def test_base_37_raises_invalid_base(warnings_sink):
    document = {
        "keys": {"n": 1, "k": 1},
        "1": {"base": 37, "value": "5"},
    }
    with pytest.raises(InvalidBase):
        extract(document, reporter=warnings_sink.append)


def test_digit_g_in_base_16_raises_invalid_digit(warnings_sink):
    document = {
        "keys": {"n": 1, "k": 1},
        "1": {"base": "16", "value": "1g"},
    }
    with pytest.raises(InvalidDigit, match="'g'"):
        extract(document, reporter=warnings_sink.append)


# =============================================================================
# X-COORDINATE PARSING
# =============================================================================


def test_parse_x_coordinate():
    assert parse_x_coordinate("1") == 1
    assert parse_x_coordinate("-4") == -4
    assert parse_x_coordinate(" 12 ") == 12
    assert parse_x_coordinate("123456789012345678901234567890") == 123456789012345678901234567890


@pytest.mark.parametrize("key", ["", "1.5", "0x10", "1e3", "+", "one"])
def test_parse_x_coordinate_rejects(key):
    with pytest.raises(MalformedInput):
        parse_x_coordinate(key)


def test_parse_x_coordinate_beyond_int_str_digit_limit():
    """Ключ длиннее интерпретаторного лимита int(str) (4300 цифр)."""
    digits = "9" * 5000
    assert parse_x_coordinate(digits) == 10**5000 - 1
    assert parse_x_coordinate("-" + digits) == -(10**5000) + 1
