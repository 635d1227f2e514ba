"""Allowance Orchestrator — allowance для cw20 и native-остаток

Разделяет AssetList (partition) и для каждого cw20 формирует инструкцию
IncreaseAllowance с коротким окном: expires = AtHeight(height + expiry_blocks),
по умолчанию height + 1. Это не постоянное разрешение.

Native-активы возвращаются без изменений (отсортированными по denom) —
вызывающая сторона прикладывает их как funds или проверяет отдельно.
Для native инструкции не формируются никогда.
"""

from typing import Iterable, List, Optional, Tuple

from loguru import logger

from src.core.contracts.validators import validate_wasm_execute_msg
from src.core.domain.asset import Asset
from src.core.domain.coins import Coin
from src.core.domain.context import Env, validate_addr
from src.core.domain.messages import Expiration, IncreaseAllowance, WasmExecuteMsg
from src.reconciliation.config import ReconciliationConfig
from src.reconciliation.partition import separate_natives_and_cw20s


class AllowanceGranter:
    """Оркестратор allowance для cw20-части списка."""

    def __init__(self, config: Optional[ReconciliationConfig] = None):
        self.config = config or ReconciliationConfig()

    def increase_allowance_msgs(
        self, env: Env, assets: Iterable[Asset], recipient: str
    ) -> Tuple[List[WasmExecuteMsg], List[Coin]]:
        """Инструкции IncreaseAllowance для cw20 и native-остаток.

        Args:
            env: окружение (высота текущего блока)
            assets: AssetList
            recipient: spender, получающий allowance

        Returns:
            (msgs, funds): инструкции для cw20 в порядке появления,
            native coins отсортированные по denom

        Raises:
            ValueError: если recipient невалиден
        """
        spender = validate_addr(recipient)
        funds, cw20s = separate_natives_and_cw20s(assets)
        expires = Expiration(at_height=env.block.height + self.config.allowance_expiry_blocks)

        msgs: List[WasmExecuteMsg] = []
        for cw20 in cw20s:
            msg = WasmExecuteMsg(
                contract_addr=cw20.address,
                msg=IncreaseAllowance(spender=spender, amount=cw20.amount, expires=expires),
            )
            if self.config.validate_messages:
                validate_wasm_execute_msg(msg)
            logger.debug(
                f"Increase allowance: {cw20} for {spender} until height {expires.at_height}"
            )
            msgs.append(msg)

        return msgs, funds


def increase_allowance_msgs(
    env: Env, assets: Iterable[Asset], recipient: str
) -> Tuple[List[WasmExecuteMsg], List[Coin]]:
    """См. AllowanceGranter.increase_allowance_msgs (конфигурация по умолчанию)."""
    return AllowanceGranter().increase_allowance_msgs(env, assets, recipient)
