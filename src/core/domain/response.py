"""
Response — результат операции: инструкции, события и атрибуты

Immutable builder: каждый add_* возвращает новый Response.
Порядок сообщений и событий сохраняется как добавлен.

Также содержит помощники для разбора ответов подсообщений
(find_event, parse_attribute_value).
"""

from typing import Callable, Iterable, Optional, Tuple, TypeVar

from pydantic import BaseModel, Field

from src.core.domain.messages import WasmExecuteMsg

T = TypeVar("T")


# =============================================================================
# EVENTS
# =============================================================================


class Attribute(BaseModel):
    key: str = Field(..., min_length=1)
    value: str

    model_config = {"frozen": True}


class Event(BaseModel):
    """Событие с типом и упорядоченными атрибутами."""

    type: str = Field(..., min_length=1, description="Тип события")
    attributes: Tuple[Attribute, ...] = ()

    model_config = {"frozen": True}

    def add_attribute(self, key: str, value: str) -> "Event":
        return self.model_copy(
            update={"attributes": self.attributes + (Attribute(key=key, value=value),)}
        )

    def add_attributes(self, attributes: Iterable[Tuple[str, str]]) -> "Event":
        event = self
        for key, value in attributes:
            event = event.add_attribute(key, value)
        return event


# =============================================================================
# RESPONSE
# =============================================================================


class Response(BaseModel):
    """Результат операции для вызывающей стороны."""

    messages: Tuple[WasmExecuteMsg, ...] = ()
    events: Tuple[Event, ...] = ()
    attributes: Tuple[Attribute, ...] = ()
    data: Optional[bytes] = None

    model_config = {"frozen": True}

    def add_message(self, msg: WasmExecuteMsg) -> "Response":
        return self.model_copy(update={"messages": self.messages + (msg,)})

    def add_messages(self, msgs: Iterable[WasmExecuteMsg]) -> "Response":
        return self.model_copy(update={"messages": self.messages + tuple(msgs)})

    def add_event(self, event: Event) -> "Response":
        return self.model_copy(update={"events": self.events + (event,)})

    def add_events(self, events: Iterable[Event]) -> "Response":
        return self.model_copy(update={"events": self.events + tuple(events)})

    def add_attribute(self, key: str, value: str) -> "Response":
        return self.model_copy(
            update={"attributes": self.attributes + (Attribute(key=key, value=value),)}
        )

    def add_attributes(self, attributes: Iterable[Attribute]) -> "Response":
        return self.model_copy(update={"attributes": self.attributes + tuple(attributes)})

    def set_data(self, data: bytes) -> "Response":
        return self.model_copy(update={"data": data})


def merge_responses(responses: Iterable[Response]) -> Response:
    """
    Слияние нескольких Response в один.

    Атрибуты, события и сообщения конкатенируются в исходном порядке.

    Raises:
        ValueError: Если data есть более чем у одного Response
    """
    merged = Response()
    for response in responses:
        merged = (
            merged.add_attributes(response.attributes)
            .add_events(response.events)
            .add_messages(response.messages)
        )
        if response.data is not None:
            if merged.data is not None:
                raise ValueError("Cannot merge multiple responses with data")
            merged = merged.set_data(response.data)
    return merged


# =============================================================================
# SUBMESSAGE REPLIES
# =============================================================================


class SubMsgResponse(BaseModel):
    """Ответ выполненного подсообщения."""

    events: Tuple[Event, ...] = ()
    data: Optional[bytes] = None

    model_config = {"frozen": True}


def find_event(res: SubMsgResponse, event_type: str) -> Event:
    """
    Поиск первого события заданного типа.

    Raises:
        LookupError: Если событие не найдено
    """
    for event in res.events:
        if event.type == event_type:
            return event
    raise LookupError(f"No `{event_type}` event found")


def parse_attribute_value(event: Event, attr_key: str, parser: Callable[[str], T] = str) -> T:
    """
    Разбор значения атрибута события.

    Args:
        event: Событие
        attr_key: Ключ атрибута (берётся первое совпадение)
        parser: Функция разбора строки (например, int)

    Raises:
        LookupError: Если атрибута нет
        ValueError: Если parser не смог разобрать значение
    """
    for attr in event.attributes:
        if attr.key == attr_key:
            try:
                return parser(attr.value)
            except (TypeError, ValueError) as e:
                raise ValueError(
                    f"Failed to parse attribute value from string. Error: {e!r}"
                ) from e
    raise LookupError(f"Event {event.type} event does not contain {attr_key} attribute")
