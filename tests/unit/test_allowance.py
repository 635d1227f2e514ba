"""Тесты для Allowance Orchestrator (increase_allowance_msgs)

Покрытие:
- cw20 → IncreaseAllowance с expires = height + 1
- native → без инструкций, возвращаются отсортированными
- Конфигурация окна allowance
"""

import pytest

from src.core.domain import (
    Asset,
    AssetList,
    BlockInfo,
    Coin,
    ContractInfo,
    Env,
    Expiration,
    IncreaseAllowance,
    WasmExecuteMsg,
)
from src.reconciliation import AllowanceGranter, ReconciliationConfig, increase_allowance_msgs


@pytest.fixture
def env():
    return Env(block=BlockInfo(height=12345), contract=ContractInfo(address="cosmos2contract"))


def test_increase_allowance_msgs(env):
    assets = AssetList([Asset.native("uatom", 100), Asset.cw20("cw20", 200)])

    msgs, funds = increase_allowance_msgs(env, assets, "spender")

    assert msgs == [
        WasmExecuteMsg(
            contract_addr="cw20",
            msg=IncreaseAllowance(
                spender="spender", amount=200, expires=Expiration(at_height=12346)
            ),
        )
    ]
    assert funds == [Coin(denom="uatom", amount=100)]


def test_expiry_is_next_block():
    """Высота H → expires at_height H+1"""
    env = Env(block=BlockInfo(height=777), contract=ContractInfo(address="contract"))

    msgs, funds = increase_allowance_msgs(env, AssetList([Asset.cw20("A", 50)]), "R")

    assert len(msgs) == 1
    assert msgs[0].contract_addr == "A"
    assert msgs[0].msg.amount == 50
    assert msgs[0].msg.expires == Expiration(at_height=778)
    assert funds == []


def test_block_info_carries_only_height():
    assert set(BlockInfo.model_fields) == {"height"}


def test_wire_format(env):
    msgs, _ = increase_allowance_msgs(env, AssetList([Asset.cw20("A", 50)]), "R")

    payload = WasmExecuteMsg.decode_msg(msgs[0].to_json_dict()["wasm"]["execute"]["msg"])

    assert payload == {
        "increase_allowance": {"spender": "R", "amount": "50", "expires": {"at_height": 12346}}
    }


def test_natives_never_get_instructions(env):
    assets = AssetList([Asset.native("uosmo", 1), Asset.native("uatom", 2)])

    msgs, funds = increase_allowance_msgs(env, assets, "spender")

    assert msgs == []
    # Native-остаток отсортирован по denom
    assert funds == [Coin(denom="uatom", amount=2), Coin(denom="uosmo", amount=1)]


def test_cw20_order_preserved(env):
    assets = AssetList([Asset.cw20("z", 1), Asset.cw20("a", 2), Asset.cw20("m", 3)])

    msgs, _ = increase_allowance_msgs(env, assets, "spender")

    assert [m.contract_addr for m in msgs] == ["z", "a", "m"]


def test_invalid_recipient(env):
    with pytest.raises(ValueError, match="Invalid address"):
        increase_allowance_msgs(env, AssetList([Asset.cw20("A", 1)]), "")


def test_custom_expiry_window(env):
    granter = AllowanceGranter(ReconciliationConfig(allowance_expiry_blocks=10))

    msgs, _ = granter.increase_allowance_msgs(env, AssetList([Asset.cw20("A", 1)]), "spender")

    assert msgs[0].msg.expires == Expiration(at_height=12355)


def test_config_rejects_zero_expiry():
    with pytest.raises(ValueError, match="allowance_expiry_blocks"):
        ReconciliationConfig(allowance_expiry_blocks=0)


def test_config_rejects_empty_event_type():
    with pytest.raises(ValueError, match="event_type"):
        ReconciliationConfig(event_type="")
