"""Тесты для Partition: separate_natives_and_cw20s и assert_native_*

Покрытие:
- Native отсортированы по denom независимо от входного порядка
- cw20 сохраняют входной порядок
- Отказ на не-native активах
- Неизвестный вид актива → UnsupportedAssetKind
"""

import pytest

from src.core.domain import Asset, AssetInfo, AssetList, Coin, Cw20Coin, to_asset_list
from src.core.errors import AssetKindMismatch, UnsupportedAssetKind
from src.reconciliation import (
    assert_native_asset_info,
    assert_native_coin,
    assert_only_native_coins,
    separate_natives_and_cw20s,
)


# =============================================================================
# ТЕСТЫ: separate_natives_and_cw20s
# =============================================================================


def test_separate_natives_sorted_by_denom():
    assets = AssetList(
        [
            Asset.native("uosmo", 10),
            Asset.cw20("osmo3", 300),
            Asset.native("uatom", 20),
            Asset.cw20("osmo1", 100),
            Asset.native("uion", 10),
            Asset.cw20("osmo2", 200),
        ]
    )

    coins, cw20s = separate_natives_and_cw20s(assets)

    assert coins == [
        Coin(denom="uatom", amount=20),
        Coin(denom="uion", amount=10),
        Coin(denom="uosmo", amount=10),
    ]
    # cw20 — в порядке появления, без сортировки
    assert cw20s == [
        Cw20Coin(address="osmo3", amount=300),
        Cw20Coin(address="osmo1", amount=100),
        Cw20Coin(address="osmo2", amount=200),
    ]


def test_separate_sort_is_lexicographic():
    """Сравнение строк по кодовым точкам: заглавные раньше строчных"""
    assets = AssetList([Asset.native("uosmo", 1), Asset.native("ibc/AB", 1), Asset.native("IBC/AB", 1)])

    coins, _ = separate_natives_and_cw20s(assets)

    assert [c.denom for c in coins] == ["IBC/AB", "ibc/AB", "uosmo"]


def test_separate_round_trip_from_parts():
    coins = [Coin(denom="uosmo", amount=10), Coin(denom="uatom", amount=20)]
    cw20s = [Cw20Coin(address="osmo1", amount=100)]

    separated_coins, separated_cw20s = separate_natives_and_cw20s(to_asset_list(coins, cw20s))

    assert len(separated_coins) == len(coins)
    assert len(separated_cw20s) == len(cw20s)
    for coin in coins:
        assert coin in separated_coins
    for cw20 in cw20s:
        assert cw20 in separated_cw20s


def test_separate_empty():
    coins, cw20s = separate_natives_and_cw20s(AssetList())
    assert coins == []
    assert cw20s == []


def test_separate_does_not_mutate_input():
    assets = AssetList([Asset.native("uosmo", 1), Asset.native("uatom", 1)])

    separate_natives_and_cw20s(assets)

    assert [a.identifier for a in assets] == ["uosmo", "uatom"]


def test_separate_unknown_kind_fails_closed():
    unknown = Asset.model_construct(
        info=AssetInfo.model_construct(kind="cw721", identifier="nft"), amount=1
    )

    with pytest.raises(UnsupportedAssetKind):
        separate_natives_and_cw20s([Asset.native("uatom", 1), unknown])


# =============================================================================
# ТЕСТЫ: assert_native_*
# =============================================================================


def test_assert_native_coin_native():
    assert assert_native_coin(Asset.native("uatom", 5)) == Coin(denom="uatom", amount=5)


def test_assert_native_coin_cw20():
    with pytest.raises(AssetKindMismatch, match="Asset is not a native token"):
        assert_native_coin(Asset.cw20("apollo", 5))


def test_assert_only_native_coins_all_native():
    assets = AssetList([Asset.native("uosmo", 1), Asset.native("uatom", 2)])

    coins = assert_only_native_coins(assets)

    # Порядок списка, без сортировки
    assert coins == [Coin(denom="uosmo", amount=1), Coin(denom="uatom", amount=2)]


def test_assert_only_native_coins_names_offending_entry():
    assets = AssetList([Asset.native("uosmo", 1000), Asset.cw20("apollo", 1000)])

    with pytest.raises(AssetKindMismatch) as exc_info:
        assert_only_native_coins(assets)

    assert exc_info.value.asset == "apollo:1000"


def test_assert_native_asset_info():
    assert assert_native_asset_info(AssetInfo.native("uatom")) == "uatom"

    with pytest.raises(AssetKindMismatch):
        assert_native_asset_info(AssetInfo.cw20("apollo"))
