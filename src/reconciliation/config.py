"""Конфигурация слоя сверки активов.

Передаётся явно в оркестраторы (AssetCollector, AllowanceGranter).
Глобального состояния нет: одна и та же конфигурация и одни и те же входы
дают одинаковые инструкции на всех репликах.
"""

from dataclasses import dataclass

# Тип диагностического события receive_asset/receive_assets
DEFAULT_EVENT_TYPE = "asset_utils/assets"


@dataclass(frozen=True)
class ReconciliationConfig:
    """Конфигурация оркестраторов.

    allowance_expiry_blocks=1 даёт короткое окно allowance: height + 1.
    """

    # Diagnostic events
    event_type: str = DEFAULT_EVENT_TYPE
    emit_events: bool = True

    # Allowance
    allowance_expiry_blocks: int = 1

    # Контракты инструкций (JSON Schema)
    validate_messages: bool = True

    def __post_init__(self):
        if not self.event_type:
            raise ValueError("event_type must be non-empty")
        if self.allowance_expiry_blocks < 1:
            raise ValueError(
                f"allowance_expiry_blocks must be >= 1, got {self.allowance_expiry_blocks}"
            )
