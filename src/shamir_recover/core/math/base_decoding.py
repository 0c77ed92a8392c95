"""
Base Decoding — Arbitrary-Base Big Integer Decoder

Преобразование строки цифр в заданной системе счисления (2..36) в точное
целое произвольной точности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакой потери точности: результат — int Python (неограниченная ширина)
2. Алфавит 0-9a-z, регистр не учитывается, пробелы по краям отбрасываются
3. Знак не поддерживается: доли всегда неотрицательны
4. Любой недопустимый символ → InvalidDigit, недопустимое основание → InvalidBase
"""

from typing import Final

from shamir_recover.core.errors import InvalidBase, InvalidDigit

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = 36

# Алфавит цифр: индекс символа == значение цифры
DIGIT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

_DIGIT_VALUES: Final[dict[str, int]] = {ch: i for i, ch in enumerate(DIGIT_ALPHABET)}


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_base(base: object) -> int:
    """
    Проверка основания системы счисления.

    Args:
        base: Основание (ожидается int в [MIN_BASE, MAX_BASE])

    Returns:
        base без изменений

    Raises:
        InvalidBase: если base не int (bool тоже не принимается) или вне диапазона
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(base)
    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidBase(base)
    return base


def coerce_base(raw: object) -> int:
    """
    Приведение основания из документа к int с последующей validate_base.

    Допускаются: int, float с целым значением (16.0), числовая строка ("16", " 8 ").
    Всё остальное (None, "hex", 16.5, bool) → InvalidBase.

    Examples:
        >>> coerce_base("16")
        16
        >>> coerce_base(8.0)
        8
    """
    if isinstance(raw, bool):
        raise InvalidBase(raw)
    if isinstance(raw, int):
        return validate_base(raw)
    if isinstance(raw, float):
        if not raw.is_integer():
            raise InvalidBase(raw)
        return validate_base(int(raw))
    if isinstance(raw, str):
        text = raw.strip()
        if not text or not text.isascii() or not text.isdigit():
            raise InvalidBase(raw)
        base = decode(text, 10)
        if base > MAX_BASE:
            # В ошибке — исходная строка: repr огромного int упирается в лимит цифр
            raise InvalidBase(raw)
        return validate_base(base)
    raise InvalidBase(raw)


# =============================================================================
# DECODE / ENCODE
# =============================================================================


def decode(digits: str, base: int) -> int:
    """
    Декодирование строки цифр в целое число.

    value = Σ digit_i · base^(len-1-i)  (big-endian)

    Args:
        digits: Строка цифр (пробелы по краям игнорируются, регистр не важен)
        base: Основание 2..36

    Returns:
        Неотрицательное целое произвольной точности

    Raises:
        InvalidBase: если base вне [2, 36]
        InvalidDigit: если символ не является цифрой в данном основании

    Examples:
        >>> decode("ff", 16)
        255
        >>> decode("  1C ", 16)
        28
        >>> decode("111", 2)
        7
    """
    validate_base(base)

    value = 0
    for ch in digits.strip().lower():
        digit = _DIGIT_VALUES.get(ch)
        if digit is None or digit >= base:
            raise InvalidDigit(ch, digits, base)
        value = value * base + digit

    return value


def encode(value: int, base: int) -> str:
    """
    Обратное преобразование: неотрицательное целое → строка цифр (нижний регистр).

    Raises:
        InvalidBase: если base вне [2, 36]
        ValueError: если value < 0

    Examples:
        >>> encode(255, 16)
        'ff'
        >>> encode(0, 7)
        '0'
    """
    validate_base(base)
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    if value == 0:
        return "0"

    chars = []
    while value:
        value, rem = divmod(value, base)
        chars.append(DIGIT_ALPHABET[rem])
    return "".join(reversed(chars))


# =============================================================================
# ДЕСЯТИЧНОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================

# Ниже интерпретаторного лимита int → str (4300 цифр по умолчанию)
_DIRECT_STR_THRESHOLD: Final[int] = 10**1000

# log10(2)
_LOG10_2: Final[float] = 0.30102999566398


def _format_non_negative(value: int, width: int) -> str:
    if value < _DIRECT_STR_THRESHOLD:
        return str(value).zfill(width)

    # Делим примерно пополам по числу десятичных цифр
    half = int(value.bit_length() * _LOG10_2) // 2
    high, low = divmod(value, 10**half)
    return _format_non_negative(high, max(width - half, 0)) + _format_non_negative(low, half)


def format_decimal(value: int) -> str:
    """
    Десятичная запись целого любой величины.

    Не зависит от sys.set_int_max_str_digits: str() вызывается только
    для кусков короче 1000 цифр.

    Examples:
        >>> format_decimal(-1234)
        '-1234'
        >>> len(format_decimal(10**5000))
        5001
    """
    if value < 0:
        return "-" + _format_non_negative(-value, 0)
    return _format_non_negative(value, 0)
