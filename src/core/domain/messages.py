"""
Messages — инструкции, которые вызывающая сторона добавляет в эффекты операции

Формат соответствует WasmMsg::Execute:
    {"wasm": {"execute": {"contract_addr": ..., "msg": <base64 JSON>, "funds": [...]}}}

Payload cw20-инструкций:
- TransferFrom      → {"transfer_from": {"owner", "recipient", "amount"}}
- IncreaseAllowance → {"increase_allowance": {"spender", "amount", "expires"}}

Суммы в JSON — десятичные строки (Uint128). Кодирование детерминировано:
компактный JSON с фиксированным порядком ключей, одинаковый на всех репликах.
"""

import base64
import json
from typing import Any, ClassVar, Dict, Optional, Union

from pydantic import BaseModel, Field

from src.core.domain.coins import Amount, Coin


# =============================================================================
# EXPIRATION
# =============================================================================


class Expiration(BaseModel):
    """Граница действия allowance по высоте блока."""

    at_height: int = Field(..., ge=0, description="Высота блока, после которой allowance истекает")

    model_config = {"frozen": True}

    def to_json_dict(self) -> Dict[str, Any]:
        return {"at_height": self.at_height}


# =============================================================================
# CW20 PAYLOADS
# =============================================================================


class TransferFrom(BaseModel):
    """Pull-transfer: перевод amount от owner к recipient по allowance."""

    schema_name: ClassVar[str] = "cw20_transfer_from"

    owner: str = Field(..., min_length=1)
    recipient: str = Field(..., min_length=1)
    amount: Amount

    model_config = {"frozen": True}

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "transfer_from": {
                "owner": self.owner,
                "recipient": self.recipient,
                "amount": str(self.amount),
            }
        }


class IncreaseAllowance(BaseModel):
    """Выдача spender права забрать до amount до истечения expires."""

    schema_name: ClassVar[str] = "cw20_increase_allowance"

    spender: str = Field(..., min_length=1)
    amount: Amount
    expires: Optional[Expiration] = None

    model_config = {"frozen": True}

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "increase_allowance": {
                "spender": self.spender,
                "amount": str(self.amount),
                "expires": self.expires.to_json_dict() if self.expires is not None else None,
            }
        }


Cw20ExecuteMsg = Union[TransferFrom, IncreaseAllowance]


# =============================================================================
# WASM EXECUTE
# =============================================================================


class WasmExecuteMsg(BaseModel):
    """
    Вызов execute на контракте.

    Immutable: однажды сформированная инструкция не меняется до передачи
    вызывающей стороне.
    """

    schema_name: ClassVar[str] = "wasm_execute_msg"

    contract_addr: str = Field(..., min_length=1, description="Адрес вызываемого контракта")
    msg: Cw20ExecuteMsg = Field(..., description="Payload cw20-инструкции")
    funds: tuple[Coin, ...] = Field(default=(), description="Native-средства, прикладываемые к вызову")

    model_config = {"frozen": True}

    def to_binary(self) -> bytes:
        """Сериализация payload в компактный JSON (аналог to_binary)."""
        return json.dumps(self.msg.to_json_dict(), separators=(",", ":")).encode("utf-8")

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "wasm": {
                "execute": {
                    "contract_addr": self.contract_addr,
                    "msg": base64.b64encode(self.to_binary()).decode("ascii"),
                    "funds": [
                        {"denom": coin.denom, "amount": str(coin.amount)} for coin in self.funds
                    ],
                }
            }
        }

    @staticmethod
    def decode_msg(encoded: str) -> Dict[str, Any]:
        """Обратное преобразование base64 payload в dict (для диагностики и тестов)."""
        return json.loads(base64.b64decode(encoded))
