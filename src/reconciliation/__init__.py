"""Reconciliation — сверка native- и cw20-активов текущей операции.

Компоненты (от листьев):
- partition:  разделение AssetList на native (сортировка по denom) и cw20
- receipt:    строгая проверка получения native в Funds Snapshot
- collection: проверка native + pull-transfer для cw20 (всё или ничего)
- allowance:  IncreaseAllowance для cw20, native-остаток без изменений
"""

from .allowance import AllowanceGranter, increase_allowance_msgs
from .collection import (
    AssetCollector,
    CollectionResult,
    receive_asset,
    receive_asset_msg,
    receive_assets,
)
from .config import DEFAULT_EVENT_TYPE, ReconciliationConfig
from .partition import (
    assert_native_asset_info,
    assert_native_coin,
    assert_only_native_coins,
    separate_natives_and_cw20s,
)
from .receipt import assert_native_token_received, assert_native_tokens_received

__all__ = [
    # Config
    "ReconciliationConfig",
    "DEFAULT_EVENT_TYPE",
    # Partition
    "separate_natives_and_cw20s",
    "assert_native_coin",
    "assert_only_native_coins",
    "assert_native_asset_info",
    # Receipt
    "assert_native_token_received",
    "assert_native_tokens_received",
    # Collection
    "AssetCollector",
    "CollectionResult",
    "receive_asset",
    "receive_asset_msg",
    "receive_assets",
    # Allowance
    "AllowanceGranter",
    "increase_allowance_msgs",
]
