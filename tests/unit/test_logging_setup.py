"""
Тесты для настройки логирования (loguru)

Проверяет, что библиотечные модули пишут через loguru и что
предупреждение логируется до того, как исключение уходит вызывающему.
"""

import pytest
from loguru import logger

from src.core.domain import Asset, Coin
from src.core.errors import AssetKindMismatch, ReceiptMismatch
from src.core.logging_setup import setup_logger
from src.reconciliation import assert_native_asset_info, assert_native_token_received


@pytest.fixture
def captured():
    """Sink-список сообщений; после теста sink снимается."""
    messages: list[str] = []
    handler_id = setup_logger("test-service", level="DEBUG", sink=messages.append)
    yield messages
    logger.remove(handler_id)


def test_service_name_in_output(captured):
    logger.info("hello")

    assert len(captured) == 1
    assert "test-service" in captured[0]
    assert "hello" in captured[0]


def test_receipt_mismatch_logged_then_raised(captured):
    with pytest.raises(ReceiptMismatch):
        assert_native_token_received([Coin(denom="uosmo", amount=1)], Asset.native("uosmo", 2))

    assert any("WARNING" in m and "uosmo:2" in m for m in captured)


def test_verified_native_logged_at_debug(captured):
    assert_native_token_received([Coin(denom="uosmo", amount=1)], Asset.native("uosmo", 1))

    assert any("DEBUG" in m and "Native token received: uosmo:1" in m for m in captured)


def test_level_filters_debug():
    messages: list[str] = []
    handler_id = setup_logger("svc", level="INFO", sink=messages.append)
    try:
        logger.debug("hidden")
        logger.info("shown")
    finally:
        logger.remove(handler_id)

    assert len(messages) == 1
    assert "shown" in messages[0]


@pytest.mark.parametrize(
    "convert, asset",
    [
        (lambda a: a.to_coin(), Asset.cw20("apollo", 5)),
        (lambda a: a.to_cw20_coin(), Asset.native("uosmo", 5)),
        (lambda a: assert_native_asset_info(a.info), Asset.cw20("apollo", 5)),
    ],
)
def test_kind_mismatch_logged_then_raised(captured, convert, asset):
    with pytest.raises(AssetKindMismatch):
        convert(asset)

    assert any("WARNING" in m and asset.identifier in m for m in captured)
