"""
Тесты для Coin / Cw20Coin и помощников coin_from_str, validate_denom
"""

import pytest
from pydantic import ValidationError

from src.core.domain import Coin, Cw20Coin, coin_from_str, validate_denom


class TestCoin:
    """Тесты для моделей балансов"""

    def test_coin_str(self) -> None:
        assert str(Coin(denom="uatom", amount=1000)) == "1000uatom"

    def test_cw20_coin_str(self) -> None:
        assert str(Cw20Coin(address="osmo1", amount=100)) == "osmo1:100"

    def test_equality_is_exact(self) -> None:
        """Записи funds сравниваются по denom и сумме"""
        assert Coin(denom="uatom", amount=10) == Coin(denom="uatom", amount=10)
        assert Coin(denom="uatom", amount=10) != Coin(denom="uatom", amount=20)

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Coin(denom="uatom", amount=-1)

    def test_empty_denom_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Coin(denom="", amount=1)


class TestCoinFromStr:
    """Тесты для coin_from_str"""

    def test_large_amount_with_path_denom(self) -> None:
        coin = coin_from_str("100000000000000000000gamm/pool/1")
        assert coin.amount == 100000000000000000000
        assert coin.denom == "gamm/pool/1"

    def test_simple(self) -> None:
        assert coin_from_str("1000uatom") == Coin(denom="uatom", amount=1000)

    @pytest.mark.parametrize("value", ["uatom", "", "1000"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(ValueError):
            coin_from_str(value)


class TestValidateDenom:
    """Тесты для validate_denom"""

    @pytest.mark.parametrize(
        "denom",
        [
            "gamm/pool/1",
            "uatom",
            "ibc/C140AFD542AE77BD7DCC83F13FDD8C5E5BB8C4929785E6EC2F4C636F98F17901",
            "IBC/C140AFD542AE77BD7DCC83F13FDD8C5E5BB8C4929785E6EC2F4C636F98F17901",
            "factory/osmo1g3kmqpp8608szfp0pdag3r6z85npph7wmccat8lgl3mp407kv73qlj7qwp/VaultToken/1/14d/ATOM/OSMO",
            "test:test/test-test.test_test",
            "tes",
            "t//",
            "test" * 32,
        ],
    )
    def test_valid(self, denom: str) -> None:
        validate_denom(denom)

    @pytest.mark.parametrize(
        "denom",
        [
            "test test",
            "test/test ",
            " test/test",
            "/test/test",
            "2test/test",
            "te",
            "test" * 32 + "t",
            "uatom\n",
        ],
    )
    def test_invalid(self, denom: str) -> None:
        with pytest.raises(ValueError, match="not a valid CosmosSDK denom"):
            validate_denom(denom)
