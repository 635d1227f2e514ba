"""Partition — разделение AssetList на native и cw20

Правила:
- Один проход по списку, относительный порядок внутри групп сохраняется
- Native-часть затем сортируется лексикографически по denom
  (host-рантайм требует отсортированные coins и сам их не сортирует)
- cw20-часть остаётся в порядке появления

Также содержит проверки вида актива (assert_native_*), которые фильтруют
список в Coin и отказывают на первом не-native активе.
"""

from typing import Iterable, List, Tuple

from loguru import logger

from src.core.domain.asset import Asset, AssetInfo, AssetKind
from src.core.domain.coins import Coin, Cw20Coin
from src.core.errors import AssetKindMismatch, UnsupportedAssetKind


def separate_natives_and_cw20s(assets: Iterable[Asset]) -> Tuple[List[Coin], List[Cw20Coin]]:
    """Разделение активов на native coins и cw20 балансы.

    Args:
        assets: AssetList (или любая последовательность Asset)

    Returns:
        (coins, cw20s): coins отсортированы по denom, cw20s — в порядке появления

    Raises:
        UnsupportedAssetKind: если встречен неизвестный вид актива
    """
    coins: List[Coin] = []
    cw20s: List[Cw20Coin] = []

    for asset in assets:
        if asset.kind == AssetKind.NATIVE:
            coins.append(Coin(denom=asset.identifier, amount=asset.amount))
        elif asset.kind == AssetKind.CW20:
            cw20s.append(Cw20Coin(address=asset.identifier, amount=asset.amount))
        else:
            raise UnsupportedAssetKind(asset.kind)

    # Устойчивая сортировка: порядок равных denom не меняется
    coins.sort(key=lambda coin: coin.denom)

    return coins, cw20s


def assert_native_coin(asset: Asset) -> Coin:
    """Проверка, что актив native.

    Returns:
        Актив как Coin

    Raises:
        AssetKindMismatch: если актив не native
    """
    if not asset.is_native():
        logger.warning(f"Asset is not a native token: {asset}")
        raise AssetKindMismatch(str(asset), expected="native")
    return asset.to_coin()


def assert_only_native_coins(assets: Iterable[Asset]) -> List[Coin]:
    """Проверка, что все активы native.

    Отказ на первом не-native активе. Порядок результата — порядок списка.

    Returns:
        Все активы как Coin

    Raises:
        AssetKindMismatch: если хотя бы один актив не native
    """
    return [assert_native_coin(asset) for asset in assets]


def assert_native_asset_info(asset_info: AssetInfo) -> str:
    """Проверка, что AssetInfo описывает native-актив.

    Returns:
        denom

    Raises:
        AssetKindMismatch: если AssetInfo не native
    """
    if not asset_info.is_native():
        logger.warning(f"Asset is not a native token: {asset_info}")
        raise AssetKindMismatch(str(asset_info), expected="native")
    return asset_info.identifier
