"""Receipt Verifier — проверка получения native-средств

Funds Snapshot (native-средства, приложенные к вызову) — ground truth.
Проверка строгая: заявленный актив должен присутствовать в funds записью
с тем же denom и той же суммой. Бо́льшая сумма того же denom НЕ
удовлетворяет меньшей заявленной (и наоборот).

Лишние denom в funds, отсутствующие в заявленном списке, допускаются.
Funds никогда не изменяются.
"""

from typing import Iterable, Sequence, Tuple

from loguru import logger

from src.core.domain.asset import Asset
from src.core.domain.coins import Coin
from src.core.errors import ReceiptMismatch
from src.reconciliation.partition import assert_native_coin, assert_only_native_coins


def _contains_exact(funds: Sequence[Coin], coin: Coin) -> bool:
    return any(f.denom == coin.denom and f.amount == coin.amount for f in funds)


def assert_native_token_received(funds: Sequence[Coin], asset: Asset) -> None:
    """Проверка, что конкретный native-актив был отправлен с вызовом.

    Args:
        funds: Funds Snapshot вызова
        asset: заявленный native-актив

    Raises:
        AssetKindMismatch: если актив не native
        ReceiptMismatch: если в funds нет записи с точно таким denom и суммой
    """
    coin = assert_native_coin(asset)

    if not _contains_exact(funds, coin):
        logger.warning(f"Native token not received: expected {asset}, funds={list(map(str, funds))}")
        raise ReceiptMismatch(str(asset))

    logger.debug(f"Native token received: {asset}")


def assert_native_tokens_received(
    funds: Sequence[Coin], assets: Iterable[Asset]
) -> Tuple[Coin, ...]:
    """Проверка, что все активы native и все были отправлены с вызовом.

    Сначала проверяется вид всех активов (до проверки получения), затем
    каждый актив ищется в funds. Дополнительные denom в funds допускаются.

    Args:
        funds: Funds Snapshot вызова
        assets: заявленные активы (только native)

    Returns:
        Funds Snapshot без изменений

    Raises:
        AssetKindMismatch: если хотя бы один актив не native
        ReceiptMismatch: если хотя бы один native-актив не получен
    """
    assets = list(assets)
    assert_only_native_coins(assets)

    for asset in assets:
        assert_native_token_received(funds, asset)

    return tuple(funds)
