"""
Numerical Safeguards — арифметика Uint128 для сумм активов

Модуль обеспечивает корректность всех операций над количествами активов:
- Проверка диапазона [0, UINT128_MAX] для любой суммы
- Checked-сложение и вычитание с исключением при переполнении
- Saturating-сложение для диагностических агрегатов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не обрезается молча (ArithmeticOverflow)
2. Отрицательная сумма никогда не появляется (ArithmeticOverflow при underflow)
3. bool не принимается как сумма (True == 1 в Python)
4. Все операции детерминированы и воспроизводимы
"""

from typing import Final

from src.core.errors import ArithmeticOverflow

# =============================================================================
# ДИАПАЗОН СУММ
# =============================================================================

# Ширина беззнакового целого для сумм (Uint128 в ledger-рантайме)
AMOUNT_BITS: Final[int] = 128

# Максимальная представимая сумма
UINT128_MAX: Final[int] = (1 << AMOUNT_BITS) - 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_amount(value: object) -> bool:
    """
    Проверка, что значение является допустимой суммой.

    Args:
        value: Проверяемое значение

    Returns:
        True если value — int (не bool) в диапазоне [0, UINT128_MAX]

    Examples:
        >>> is_valid_amount(1000)
        True
        >>> is_valid_amount(-1)
        False
        >>> is_valid_amount(True)
        False
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= UINT128_MAX


def validate_amount(value: int, name: str = "amount") -> int:
    """
    Валидация суммы с информативной ошибкой.

    Args:
        value: Проверяемая сумма
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        ValueError: Если value не int, отрицательное или больше UINT128_MAX
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    if value > UINT128_MAX:
        raise ValueError(f"{name} exceeds Uint128 range, got {value}")

    return value


# =============================================================================
# CHECKED-АРИФМЕТИКА
# =============================================================================


def checked_add(a: int, b: int) -> int:
    """
    Сложение двух сумм с проверкой переполнения.

    Args:
        a: Первая сумма
        b: Вторая сумма

    Returns:
        a + b

    Raises:
        ArithmeticOverflow: Если a + b > UINT128_MAX

    Examples:
        >>> checked_add(100, 200)
        300
        >>> checked_add(UINT128_MAX, 1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ArithmeticOverflow: ...
    """
    validate_amount(a, "a")
    validate_amount(b, "b")

    result = a + b
    if result > UINT128_MAX:
        raise ArithmeticOverflow("add", a, b)

    return result


def checked_sub(a: int, b: int) -> int:
    """
    Вычитание сумм с проверкой underflow.

    Raises:
        ArithmeticOverflow: Если b > a
    """
    validate_amount(a, "a")
    validate_amount(b, "b")

    if b > a:
        raise ArithmeticOverflow("sub", a, b)

    return a - b


def saturating_add(a: int, b: int) -> int:
    """
    Сложение с насыщением на UINT128_MAX.

    Для сумм, влияющих на состояние, применяется checked_add.
    """
    validate_amount(a, "a")
    validate_amount(b, "b")
    return min(a + b, UINT128_MAX)
