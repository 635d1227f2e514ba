"""
Asset — единое представление native- и cw20-активов

Закрытый sum-тип из двух вариантов:
- NATIVE: баланс host-ledger, приходит вместе с вызовом (identifier = denom)
- CW20: баланс токена, перемещается только явной инструкцией (identifier = адрес)

Идентичность актива — пара (kind, identifier) = AssetInfo.
Равенство Asset определяется только AssetInfo и не зависит от суммы.
Для точного сравнения значения (включая сумму) используется same_value().
"""

from enum import Enum

from loguru import logger
from pydantic import BaseModel, Field

from src.core.domain.coins import Amount, Coin, Cw20Coin
from src.core.domain.messages import TransferFrom, WasmExecuteMsg
from src.core.errors import AssetKindMismatch, UnsupportedAssetKind


# =============================================================================
# ENUMS
# =============================================================================


class AssetKind(str, Enum):
    """Вид актива"""

    NATIVE = "native"
    CW20 = "cw20"


# =============================================================================
# ASSET INFO
# =============================================================================


class AssetInfo(BaseModel):
    """
    Идентичность актива: (kind, identifier).

    Hashable (frozen=True), используется как ключ дедупликации в AssetList.
    """

    kind: AssetKind = Field(..., description="Вид актива (native/cw20)")
    identifier: str = Field(..., min_length=1, description="Denom или адрес cw20-контракта")

    model_config = {"frozen": True}

    @classmethod
    def native(cls, denom: str) -> "AssetInfo":
        return cls(kind=AssetKind.NATIVE, identifier=denom)

    @classmethod
    def cw20(cls, address: str) -> "AssetInfo":
        return cls(kind=AssetKind.CW20, identifier=address)

    def is_native(self) -> bool:
        """
        True для native-актива.

        Raises:
            UnsupportedAssetKind: Если вид актива неизвестен
        """
        if self.kind == AssetKind.NATIVE:
            return True
        if self.kind == AssetKind.CW20:
            return False
        raise UnsupportedAssetKind(self.kind)

    def __str__(self) -> str:
        return self.identifier


# =============================================================================
# ASSET
# =============================================================================


class Asset(BaseModel):
    """
    Актив с суммой.

    Immutable модель (frozen=True). Изменение суммы создаёт новый экземпляр
    через with_amount().
    """

    info: AssetInfo = Field(..., description="Идентичность актива")
    amount: Amount

    model_config = {"frozen": True}

    @classmethod
    def native(cls, denom: str, amount: int) -> "Asset":
        return cls(info=AssetInfo.native(denom), amount=amount)

    @classmethod
    def cw20(cls, address: str, amount: int) -> "Asset":
        return cls(info=AssetInfo.cw20(address), amount=amount)

    @classmethod
    def from_coin(cls, coin: Coin) -> "Asset":
        return cls.native(coin.denom, coin.amount)

    @classmethod
    def from_cw20_coin(cls, cw20: Cw20Coin) -> "Asset":
        return cls.cw20(cw20.address, cw20.amount)

    @property
    def kind(self) -> AssetKind:
        return self.info.kind

    @property
    def identifier(self) -> str:
        return self.info.identifier

    def is_native(self) -> bool:
        return self.info.is_native()

    def with_amount(self, amount: int) -> "Asset":
        return Asset(info=self.info, amount=amount)

    def same_value(self, other: "Asset") -> bool:
        """Точное сравнение: совпадают и AssetInfo, и сумма."""
        return self.info == other.info and self.amount == other.amount

    def to_coin(self) -> Coin:
        """
        Конверсия native-актива в Coin.

        Raises:
            AssetKindMismatch: Если актив cw20
        """
        if not self.is_native():
            logger.warning(f"Asset is not a native token: {self}")
            raise AssetKindMismatch(str(self), expected="native")
        return Coin(denom=self.identifier, amount=self.amount)

    def to_cw20_coin(self) -> Cw20Coin:
        """
        Конверсия cw20-актива в Cw20Coin.

        Raises:
            AssetKindMismatch: Если актив native
        """
        if self.is_native():
            logger.warning(f"Asset is not a cw20 token: {self}")
            raise AssetKindMismatch(str(self), expected="cw20")
        return Cw20Coin(address=self.identifier, amount=self.amount)

    def transfer_from_msg(self, owner: str, recipient: str) -> WasmExecuteMsg:
        """
        Pull-transfer инструкция: перевод суммы от owner к recipient.

        Args:
            owner: Отправитель (sender операции)
            recipient: Получатель (адрес контракта)

        Returns:
            WasmExecuteMsg с payload TransferFrom

        Raises:
            AssetKindMismatch: Если актив native (native нельзя "вытянуть")
        """
        cw20 = self.to_cw20_coin()
        return WasmExecuteMsg(
            contract_addr=cw20.address,
            msg=TransferFrom(owner=owner, recipient=recipient, amount=cw20.amount),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Asset):
            return NotImplemented
        return self.info == other.info

    def __hash__(self) -> int:
        return hash(self.info)

    def __str__(self) -> str:
        return f"{self.identifier}:{self.amount}"
