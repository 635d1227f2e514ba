"""
AssetList — упорядоченный список активов с уникальностью по AssetInfo

ИНВАРИАНТЫ:
1. Нет двух записей с одинаковым (kind, identifier)
2. Порядок — порядок первого появления (insertion order)
3. add() существующего актива суммирует amount через checked_add
   (ArithmeticOverflow при выходе за Uint128, без обрезки)
4. Единственный способ изменения — add()/add_many()

Список живёт в пределах одной операции и не разделяется между вызовами.
"""

from typing import Iterable, Iterator, List, Optional, Sequence, Union

from src.core.domain.asset import Asset, AssetInfo
from src.core.domain.coins import Coin, Cw20Coin
from src.core.domain.context import validate_addr
from src.core.math.numerical_safeguards import checked_add


class AssetList:
    """Упорядоченный набор уникальных активов с суммированием дубликатов."""

    def __init__(self, assets: Optional[Iterable[Asset]] = None):
        """
        Args:
            assets: начальные активы; дубликаты суммируются тем же правилом, что и add()
        """
        self._assets: List[Asset] = []
        if assets is not None:
            self.add_many(assets)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_assets(cls, assets: Iterable[Asset]) -> "AssetList":
        """Создание списка из произвольной последовательности Asset (дубликаты суммируются)."""
        return cls(assets)

    @classmethod
    def from_parts(
        cls,
        coins: Optional[Sequence[Coin]] = None,
        cw20s: Optional[Sequence[Cw20Coin]] = None,
    ) -> "AssetList":
        """Создание списка из native-балансов и cw20-балансов.

        Сначала все coins (в порядке вызывающей стороны), затем все cw20s.
        Native всегда предшествуют cw20 в результате.

        Args:
            coins: native-балансы (опционально)
            cw20s: cw20-балансы (опционально); адреса проходят validate_addr

        Returns:
            AssetList без дубликатов

        Raises:
            ArithmeticOverflow: при переполнении суммы дубликатов
            ValueError: при невалидном адресе cw20
        """
        assets = cls()

        for coin in coins or ():
            assets.add(Asset.from_coin(coin))

        for cw20 in cw20s or ():
            assets.add(Asset.cw20(validate_addr(cw20.address), cw20.amount))

        return assets

    # -------------------------------------------------------------------------
    # Изменение
    # -------------------------------------------------------------------------

    def add(self, asset: Asset) -> "AssetList":
        """Добавление актива.

        Если актив с тем же AssetInfo уже есть — его сумма заменяется
        на checked-сумму; иначе актив добавляется в конец.

        Returns:
            self (для цепочек вызовов)

        Raises:
            ArithmeticOverflow: если сумма превышает UINT128_MAX
        """
        for idx, existing in enumerate(self._assets):
            if existing.info == asset.info:
                self._assets[idx] = existing.with_amount(checked_add(existing.amount, asset.amount))
                return self

        self._assets.append(asset)
        return self

    def add_many(self, assets: Iterable[Asset]) -> "AssetList":
        for asset in assets:
            self.add(asset)
        return self

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    def find(self, info: AssetInfo) -> Optional[Asset]:
        """Поиск актива по AssetInfo; None если отсутствует."""
        for asset in self._assets:
            if asset.info == info:
                return asset
        return None

    def to_list(self) -> List[Asset]:
        return list(self._assets)

    def __iter__(self) -> Iterator[Asset]:
        return iter(list(self._assets))

    def __len__(self) -> int:
        return len(self._assets)

    def __getitem__(self, idx: int) -> Asset:
        return self._assets[idx]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, AssetInfo):
            return self.find(item) is not None
        if isinstance(item, Asset):
            return self.find(item.info) is not None
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AssetList):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a.same_value(b) for a, b in zip(self._assets, other._assets))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AssetList({self._assets!r})"

    def __str__(self) -> str:
        if not self._assets:
            return "[]"
        return ",".join(str(asset) for asset in self._assets)


# =============================================================================
# FUNCTIONS
# =============================================================================


def to_asset_list(
    coins: Optional[Sequence[Coin]] = None,
    cw20s: Optional[Sequence[Cw20Coin]] = None,
) -> AssetList:
    """Создание AssetList из native- и cw20-балансов (см. AssetList.from_parts)."""
    return AssetList.from_parts(coins, cw20s)


def merge_assets(assets: Union[AssetList, Iterable[Asset]]) -> AssetList:
    """Слияние дубликатов.

    Каждая запись заново проходит add() в новый список — мультимножественная
    сумма по AssetInfo. Порядок — порядок первого появления.

    Args:
        assets: AssetList или любая последовательность Asset (возможно с дубликатами)

    Returns:
        Новый AssetList без дубликатов

    Raises:
        ArithmeticOverflow: при переполнении суммы
    """
    merged = AssetList()
    for asset in assets:
        merged.add(asset)
    return merged
