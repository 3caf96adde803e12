from typing import Iterable

from replymarkup.markup.dataclasses import (
    InlineKeyboardButton, InlineKeyboardButtonKind, InlineKeyboardMarkup, KeyboardButton, ReplyKeyboardMarkup
)


def _row(row: Iterable) -> Iterable:
    if isinstance(row, str):
        raise TypeError(f"keyboard row must be a sequence of buttons, got string {row!r}")
    return row


def _keyboard_button(item: str | KeyboardButton) -> KeyboardButton:
    if isinstance(item, KeyboardButton):
        return item
    if isinstance(item, str):
        return KeyboardButton.from_text(item)
    raise TypeError(f"cannot make a keyboard button from {type(item).__name__}")


def _inline_button(item: InlineKeyboardButton | tuple[str, InlineKeyboardButtonKind]) -> InlineKeyboardButton:
    if isinstance(item, InlineKeyboardButton):
        return item
    if isinstance(item, tuple) and len(item) == 2:
        text, kind = item
        return InlineKeyboardButton(text=text, kind=kind)
    raise TypeError(f"cannot make an inline button from {type(item).__name__}")


def reply_keyboard(
        *rows: Iterable[str | KeyboardButton],
        resize_keyboard: bool = False,
        one_time_keyboard: bool = False,
        selective: bool = False,
) -> ReplyKeyboardMarkup:
    """Собирает клавиатуру из строк кнопок, строки превращаются в обычные кнопки"""
    return ReplyKeyboardMarkup(
        keyboard=tuple(tuple(_keyboard_button(item) for item in _row(row)) for row in rows),
        resize_keyboard=resize_keyboard,
        one_time_keyboard=one_time_keyboard,
        selective=selective,
    )


def inline_keyboard(
        *rows: Iterable[InlineKeyboardButton | tuple[str, InlineKeyboardButtonKind]]
) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=tuple(tuple(_inline_button(item) for item in _row(row)) for row in rows)
    )
