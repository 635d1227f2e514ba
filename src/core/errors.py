"""
Ошибки сверки активов

Таксономия:
- ReceiptMismatch: заявленный native-актив не найден в funds с точной суммой
- AssetKindMismatch: cw20-актив там, где допустимы только native
- ArithmeticOverflow: сумма вышла за диапазон Uint128
- UnsupportedAssetKind: неизвестный вид актива (fail closed)

Все ошибки прерывают текущую операцию целиком. Повторов внутри нет:
решение о повторе принимает вызывающая сторона.
"""


class AssetError(Exception):
    """Базовая ошибка подсистемы сверки активов."""

    pass


class ReceiptMismatch(AssetError):
    """
    Native-актив не был получен вместе с вызовом.

    Проверка строгая: funds должны содержать запись с тем же denom
    и той же суммой. Больше или меньше — одинаково ошибка.
    """

    def __init__(self, asset: str):
        self.asset = asset
        super().__init__(f"Assert native token received failed for asset: {asset}")


class AssetKindMismatch(AssetError):
    """Актив неожиданного вида (например, cw20 среди native)."""

    def __init__(self, asset: str, expected: str):
        self.asset = asset
        self.expected = expected
        super().__init__(f"Asset is not a {expected} token: {asset}")


class ArithmeticOverflow(AssetError):
    """Результат операции над суммами вне диапазона [0, UINT128_MAX]."""

    def __init__(self, operation: str, a: int, b: int):
        self.operation = operation
        self.a = a
        self.b = b
        super().__init__(f"Cannot {operation} {a} and {b}: Uint128 overflow")


class UnsupportedAssetKind(AssetError):
    """Неизвестный вид актива. Компонент отказывает, а не пропускает запись."""

    def __init__(self, kind: object):
        self.kind = kind
        super().__init__(f"Unsupported asset kind: {kind!r}")
