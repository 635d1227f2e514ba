"""
JSON Schema Contract Validators

Модуль для валидации инструкций, отдаваемых host-окружению, согласно
формальным JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (schema/*.json):
- wasm_execute_msg.json        — конверт WasmMsg::Execute
- cw20_transfer_from.json      — payload pull-transfer
- cw20_increase_allowance.json — payload allowance
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.messages import WasmExecuteMsg


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'wasm_execute_msg')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class WasmExecuteMsgValidator(ContractValidator):
    """Валидатор конверта WasmMsg::Execute."""

    def __init__(self):
        super().__init__("wasm_execute_msg")


class TransferFromValidator(ContractValidator):
    """Валидатор payload Cw20ExecuteMsg::TransferFrom."""

    def __init__(self):
        super().__init__("cw20_transfer_from")


class IncreaseAllowanceValidator(ContractValidator):
    """Валидатор payload Cw20ExecuteMsg::IncreaseAllowance."""

    def __init__(self):
        super().__init__("cw20_increase_allowance")


_PAYLOAD_VALIDATORS = {
    "cw20_transfer_from": TransferFromValidator,
    "cw20_increase_allowance": IncreaseAllowanceValidator,
}


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_transfer_from(data: Dict[str, Any]) -> None:
    """
    Валидация payload transfer_from.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    TransferFromValidator().validate(data)


def validate_increase_allowance(data: Dict[str, Any]) -> None:
    """
    Валидация payload increase_allowance.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    IncreaseAllowanceValidator().validate(data)


def validate_wasm_execute_msg(msg: WasmExecuteMsg) -> None:
    """
    Валидация инструкции целиком: конверт и декодированный payload.

    Args:
        msg: Инструкция для валидации

    Raises:
        ValidationError: Если конверт или payload не соответствуют схемам
        ValueError: Если для payload нет схемы
    """
    envelope = msg.to_json_dict()
    WasmExecuteMsgValidator().validate(envelope)

    validator_cls = _PAYLOAD_VALIDATORS.get(msg.msg.schema_name)
    if validator_cls is None:
        raise ValueError(f"No contract schema for payload: {msg.msg.schema_name}")

    payload = WasmExecuteMsg.decode_msg(envelope["wasm"]["execute"]["msg"])
    validator_cls().validate(payload)
