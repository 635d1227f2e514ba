"""
Context — входные данные текущей операции от host-окружения

- MessageInfo: sender и Funds Snapshot (native-средства, приложенные к вызову)
- Env: высота текущего блока и адрес контракта (receiving identity)

Funds Snapshot — read-only ground truth: хранится как tuple, никогда не
дедуплицируется и не сортируется этой подсистемой.
"""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from src.core.domain.coins import Coin


def validate_addr(addr: str) -> str:
    """
    Минимальная проверка непрозрачного адреса.

    Адрес не пустой и не содержит пробельных символов. Проверка формата
    (bech32 и т.п.) — ответственность host-окружения.

    Raises:
        ValueError: Если адрес пустой или содержит пробелы
    """
    if not addr:
        raise ValueError("Invalid address: empty")
    if any(ch.isspace() for ch in addr):
        raise ValueError(f"Invalid address: contains whitespace: {addr!r}")
    return addr


Addr = Annotated[str, AfterValidator(validate_addr)]


class MessageInfo(BaseModel):
    """Информация о вызове: кто вызвал и какие native-средства приложил."""

    sender: Addr = Field(..., description="Адрес вызывающего")
    funds: tuple[Coin, ...] = Field(default=(), description="Funds Snapshot (в порядке host)")

    model_config = {"frozen": True}


class BlockInfo(BaseModel):
    """Текущий блок."""

    height: int = Field(..., ge=0, description="Высота блока")

    model_config = {"frozen": True}


class ContractInfo(BaseModel):
    address: Addr = Field(..., description="Адрес текущего контракта")

    model_config = {"frozen": True}


class Env(BaseModel):
    """Окружение выполнения: блок и контракт."""

    block: BlockInfo
    contract: ContractInfo

    model_config = {"frozen": True}
