"""
Contract Validation Module

Модуль для валидации инструкций (WasmMsg::Execute и cw20 payload)
против JSON Schema контрактов.
"""

from .validators import (
    ContractValidator,
    IncreaseAllowanceValidator,
    SchemaLoader,
    TransferFromValidator,
    ValidationError,
    WasmExecuteMsgValidator,
    validate_increase_allowance,
    validate_transfer_from,
    validate_wasm_execute_msg,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "WasmExecuteMsgValidator",
    "TransferFromValidator",
    "IncreaseAllowanceValidator",
    "ValidationError",
    # Functions
    "validate_transfer_from",
    "validate_increase_allowance",
    "validate_wasm_execute_msg",
]
