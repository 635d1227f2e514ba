"""Collection Orchestrator — сбор заявленных активов в контракт

Для каждого актива в порядке списка:
- CW20   → pull-transfer инструкция (TransferFrom от sender к адресу контракта),
           без проверок: доверие делегируется исполнению инструкции
- NATIVE → проверка получения в funds (строгое совпадение), инструкций нет

Всё или ничего: первая ошибка проверки прерывает сбор целиком,
частичный набор инструкций не возвращается.

Интеграция:
- MessageInfo: sender и Funds Snapshot
- Env: адрес контракта (получатель pull-transfer)
- ReconciliationConfig: события и валидация инструкций по JSON Schema
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from loguru import logger

from src.core.contracts.validators import validate_wasm_execute_msg
from src.core.domain.asset import Asset, AssetKind
from src.core.domain.coins import Coin
from src.core.domain.context import Env, MessageInfo
from src.core.domain.messages import WasmExecuteMsg
from src.core.domain.response import Event, Response
from src.core.errors import UnsupportedAssetKind
from src.reconciliation.config import ReconciliationConfig
from src.reconciliation.receipt import assert_native_token_received


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CollectionResult:
    """Результат сбора активов.

    Создаётся только если получение подтверждено для всех native.
    """

    # Pull-transfer инструкции (только cw20, в исходном порядке)
    messages: Tuple[WasmExecuteMsg, ...]

    # Native-активы, получение которых подтверждено
    verified_natives: Tuple[Coin, ...]


# =============================================================================
# ORCHESTRATOR
# =============================================================================


class AssetCollector:
    """Оркестратор сбора: проверка native и pull-transfer для cw20.

    Stateless: между вызовами ничего не хранит.
    """

    def __init__(self, config: Optional[ReconciliationConfig] = None):
        """
        Args:
            config: конфигурация (default: ReconciliationConfig())
        """
        self.config = config or ReconciliationConfig()

    def receive_asset_msg(
        self, info: MessageInfo, env: Env, asset: Asset
    ) -> Optional[WasmExecuteMsg]:
        """Инструкция для получения одного актива.

        Returns:
            WasmExecuteMsg для cw20; None для native (средства уже получены)

        Raises:
            ReceiptMismatch: если native-актив не получен
            UnsupportedAssetKind: если вид актива неизвестен
        """
        if asset.kind == AssetKind.CW20:
            msg = asset.transfer_from_msg(owner=info.sender, recipient=env.contract.address)
            if self.config.validate_messages:
                validate_wasm_execute_msg(msg)
            logger.debug(
                f"Pull transfer: {asset} from {info.sender} to {env.contract.address}"
            )
            return msg

        if asset.kind == AssetKind.NATIVE:
            assert_native_token_received(info.funds, asset)
            return None

        raise UnsupportedAssetKind(asset.kind)

    def collect(self, info: MessageInfo, env: Env, assets: Iterable[Asset]) -> CollectionResult:
        """Сбор всех активов списка за один проход.

        Args:
            info: sender и Funds Snapshot
            env: окружение (адрес контракта)
            assets: AssetList

        Returns:
            CollectionResult с инструкциями и подтверждёнными native

        Raises:
            ReceiptMismatch: при первом неполученном native (ничего не возвращается)
        """
        messages: List[WasmExecuteMsg] = []
        verified: List[Coin] = []

        for asset in assets:
            msg = self.receive_asset_msg(info, env, asset)
            if msg is None:
                verified.append(asset.to_coin())
            else:
                messages.append(msg)

        return CollectionResult(messages=tuple(messages), verified_natives=tuple(verified))

    def receive_asset(self, info: MessageInfo, env: Env, asset: Asset) -> Response:
        """Получение одного актива.

        Returns:
            Response с pull-transfer инструкцией (cw20) или без инструкций (native)
            и диагностическим событием action=receive_asset
        """
        msg = self.receive_asset_msg(info, env, asset)

        response = Response()
        if msg is not None:
            response = response.add_message(msg)
        if self.config.emit_events:
            response = response.add_event(
                Event(type=self.config.event_type).add_attributes(
                    [("action", "receive_asset"), ("asset", str(asset))]
                )
            )
        return response

    def receive_assets(self, info: MessageInfo, env: Env, assets: Iterable[Asset]) -> Response:
        """Получение всех активов списка (вариант collectMany).

        Returns:
            Response со всеми pull-transfer инструкциями и событием
            action=receive_assets

        Raises:
            ReceiptMismatch: при любом неполученном native (Response не создаётся)
        """
        assets = list(assets)
        result = self.collect(info, env, assets)

        logger.debug(
            f"Assets received: {len(result.messages)} pull transfers, "
            f"{len(result.verified_natives)} natives verified"
        )

        response = Response().add_messages(result.messages)
        if self.config.emit_events:
            rendered = ",".join(str(asset) for asset in assets) if assets else "[]"
            response = response.add_event(
                Event(type=self.config.event_type).add_attributes(
                    [("action", "receive_assets"), ("assets", rendered)]
                )
            )
        return response


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def receive_asset_msg(info: MessageInfo, env: Env, asset: Asset) -> Optional[WasmExecuteMsg]:
    """См. AssetCollector.receive_asset_msg (конфигурация по умолчанию)."""
    return AssetCollector().receive_asset_msg(info, env, asset)


def receive_asset(info: MessageInfo, env: Env, asset: Asset) -> Response:
    """См. AssetCollector.receive_asset (конфигурация по умолчанию)."""
    return AssetCollector().receive_asset(info, env, asset)


def receive_assets(info: MessageInfo, env: Env, assets: Iterable[Asset]) -> Response:
    """См. AssetCollector.receive_assets (конфигурация по умолчанию)."""
    return AssetCollector().receive_assets(info, env, assets)
