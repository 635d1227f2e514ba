"""
Domain models and value objects.

Contains fundamental domain entities like Asset, AssetList, Coin, the
instruction messages emitted for the host, and the call context.
"""

from src.core.domain.asset import Asset, AssetInfo, AssetKind
from src.core.domain.asset_list import AssetList, merge_assets, to_asset_list
from src.core.domain.coins import Amount, Coin, Cw20Coin, coin_from_str, validate_denom
from src.core.domain.context import (
    BlockInfo,
    ContractInfo,
    Env,
    MessageInfo,
    validate_addr,
)
from src.core.domain.messages import (
    Cw20ExecuteMsg,
    Expiration,
    IncreaseAllowance,
    TransferFrom,
    WasmExecuteMsg,
)
from src.core.domain.response import (
    Attribute,
    Event,
    Response,
    SubMsgResponse,
    find_event,
    merge_responses,
    parse_attribute_value,
)

__all__ = [
    # Asset model
    "Asset",
    "AssetInfo",
    "AssetKind",
    # Asset list
    "AssetList",
    "merge_assets",
    "to_asset_list",
    # Coins
    "Amount",
    "Coin",
    "Cw20Coin",
    "coin_from_str",
    "validate_denom",
    # Context
    "BlockInfo",
    "ContractInfo",
    "Env",
    "MessageInfo",
    "validate_addr",
    # Messages
    "Cw20ExecuteMsg",
    "Expiration",
    "IncreaseAllowance",
    "TransferFrom",
    "WasmExecuteMsg",
    # Response
    "Attribute",
    "Event",
    "Response",
    "SubMsgResponse",
    "find_event",
    "merge_responses",
    "parse_attribute_value",
]
