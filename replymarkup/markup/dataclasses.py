from dataclasses import dataclass, field
from enum import Enum


class TrueMarker(Enum):
    TRUE = True


@dataclass(frozen=True)
class Url:
    data: str


@dataclass(frozen=True)
class CallbackData:
    data: str


@dataclass(frozen=True)
class SwitchInlineQuery:
    data: str


@dataclass(frozen=True)
class SwitchInlineQueryCurrentChat:
    data: str


InlineKeyboardButtonKind = Url | CallbackData | SwitchInlineQuery | SwitchInlineQueryCurrentChat


@dataclass(frozen=True)
class InlineKeyboardButtonRaw:
    text: str
    url: str | None = None
    callback_data: str | None = None
    switch_inline_query: str | None = None
    switch_inline_query_current_chat: str | None = None


@dataclass(frozen=True)
class InlineKeyboardButton:
    text: str
    kind: InlineKeyboardButtonKind

    def to_raw(self) -> InlineKeyboardButtonRaw:
        """Кладёт данные кнопки ровно в одно из необязательных полей"""
        if isinstance(self.kind, Url):
            return InlineKeyboardButtonRaw(text=self.text, url=self.kind.data)
        elif isinstance(self.kind, CallbackData):
            return InlineKeyboardButtonRaw(text=self.text, callback_data=self.kind.data)
        elif isinstance(self.kind, SwitchInlineQuery):
            return InlineKeyboardButtonRaw(text=self.text, switch_inline_query=self.kind.data)
        elif isinstance(self.kind, SwitchInlineQueryCurrentChat):
            return InlineKeyboardButtonRaw(text=self.text, switch_inline_query_current_chat=self.kind.data)
        raise TypeError(f"unknown inline button kind: {type(self.kind).__name__}")


def _freeze_rows(rows) -> tuple:
    return tuple(tuple(row) for row in rows)


class _ReplyMarkupValue:
    def to_reply_markup(self) -> "ReplyMarkup":
        return ReplyMarkup.from_value(self)


@dataclass(frozen=True)
class InlineKeyboardMarkup(_ReplyMarkupValue):
    inline_keyboard: tuple[tuple[InlineKeyboardButton, ...], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "inline_keyboard", _freeze_rows(self.inline_keyboard))


@dataclass(frozen=True)
class KeyboardButton:
    text: str
    request_contact: bool = False
    request_location: bool = False

    @classmethod
    def from_text(cls, text: str) -> "KeyboardButton":
        return cls(text=text)


@dataclass(frozen=True)
class ReplyKeyboardMarkup(_ReplyMarkupValue):
    keyboard: tuple[tuple[KeyboardButton, ...], ...] = ()
    resize_keyboard: bool = False
    one_time_keyboard: bool = False
    selective: bool = False

    def __post_init__(self):
        object.__setattr__(self, "keyboard", _freeze_rows(self.keyboard))


@dataclass(frozen=True)
class ReplyKeyboardRemove(_ReplyMarkupValue):
    remove_keyboard: TrueMarker = field(default=TrueMarker.TRUE, init=False)
    selective: bool = False


@dataclass(frozen=True)
class ForceReply(_ReplyMarkupValue):
    force_reply: TrueMarker = field(default=TrueMarker.TRUE, init=False)
    selective: bool = False


class ReplyMarkupKind(Enum):
    INLINE_KEYBOARD = "inline_keyboard"
    REPLY_KEYBOARD = "reply_keyboard"
    REPLY_KEYBOARD_REMOVE = "reply_keyboard_remove"
    FORCE_REPLY = "force_reply"


ReplyMarkupValue = InlineKeyboardMarkup | ReplyKeyboardMarkup | ReplyKeyboardRemove | ForceReply

_KINDS = {
    InlineKeyboardMarkup: ReplyMarkupKind.INLINE_KEYBOARD,
    ReplyKeyboardMarkup: ReplyMarkupKind.REPLY_KEYBOARD,
    ReplyKeyboardRemove: ReplyMarkupKind.REPLY_KEYBOARD_REMOVE,
    ForceReply: ReplyMarkupKind.FORCE_REPLY,
}


def _kind_of(value) -> ReplyMarkupKind:
    for cls, kind in _KINDS.items():
        if isinstance(value, cls):
            return kind
    raise TypeError(f"{type(value).__name__} is not a reply markup")


@dataclass(frozen=True)
class ReplyMarkup:
    kind: ReplyMarkupKind
    value: ReplyMarkupValue

    def __post_init__(self):
        if _kind_of(self.value) is not self.kind:
            raise TypeError(f"{type(self.value).__name__} does not match kind {self.kind.name}")

    @classmethod
    def from_value(cls, value: "ReplyMarkup | ReplyMarkupValue") -> "ReplyMarkup":
        if isinstance(value, ReplyMarkup):
            return value
        return cls(kind=_kind_of(value), value=value)
