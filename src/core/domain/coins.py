"""
Coins — записи балансов native и cw20

Coin — native-баланс, прикреплённый к вызову (denom + amount).
Cw20Coin — баланс cw20-токена (адрес контракта + amount).

Обе модели immutable. Равенство — по всем полям: именно так сравниваются
записи Funds Snapshot при проверке получения (точное совпадение denom и суммы).
"""

import re
from typing import Annotated, Final

from pydantic import BaseModel, Field

from src.core.math.numerical_safeguards import UINT128_MAX

# Сумма актива: беззнаковое целое в диапазоне Uint128
Amount = Annotated[int, Field(ge=0, le=UINT128_MAX, description="Сумма (Uint128)")]

# Формат Cosmos SDK denom
DENOM_REGEX: Final[re.Pattern[str]] = re.compile(r"^[a-zA-Z][a-zA-Z0-9/:._-]{2,127}$")


# =============================================================================
# MODELS
# =============================================================================


class Coin(BaseModel):
    """Native-баланс (денежная единица host-ledger)."""

    denom: str = Field(..., min_length=1, description="Denom (например, 'uatom')")
    amount: Amount

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


class Cw20Coin(BaseModel):
    """Баланс cw20-токена, перемещаемый только явной инструкцией."""

    address: str = Field(..., min_length=1, description="Адрес cw20-контракта")
    amount: Amount

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.address}:{self.amount}"


# =============================================================================
# HELPERS
# =============================================================================


def coin_from_str(s: str) -> Coin:
    """
    Парсинг Coin из строки формата {amount}{denom}.

    Examples:
        >>> coin_from_str("100000000000000000000gamm/pool/1")
        Coin(denom='gamm/pool/1', amount=100000000000000000000)

    Raises:
        ValueError: Если строка не начинается с цифр или denom пуст
    """
    idx = 0
    while idx < len(s) and "0" <= s[idx] <= "9":
        idx += 1

    if idx == 0:
        raise ValueError(f"Coin string must start with an amount: {s!r}")
    if idx == len(s):
        raise ValueError(f"Coin string has no denom: {s!r}")

    return Coin(denom=s[idx:], amount=int(s[:idx]))


def validate_denom(denom: str) -> None:
    """
    Проверка строки как валидного Cosmos SDK denom.

    Регулярное выражение: ^[a-zA-Z][a-zA-Z0-9/:._-]{2,127}$

    Raises:
        ValueError: Если строка не является валидным denom
    """
    if not DENOM_REGEX.fullmatch(denom):
        raise ValueError("Provided string is not a valid CosmosSDK denom.")
