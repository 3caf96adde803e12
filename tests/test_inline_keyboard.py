import pytest

from replymarkup.markup.dataclasses import (
    CallbackData, InlineKeyboardButton, InlineKeyboardMarkup, SwitchInlineQuery, SwitchInlineQueryCurrentChat, Url
)
from replymarkup.markup.schemes import InlineKeyboardButtonSchema, InlineKeyboardMarkupSchema

ACTION_KEYS = {"url", "callback_data", "switch_inline_query", "switch_inline_query_current_chat"}


@pytest.mark.parametrize("kind, key", [
    (Url("https://example.com"), "url"),
    (CallbackData("cb1"), "callback_data"),
    (SwitchInlineQuery("query"), "switch_inline_query"),
    (SwitchInlineQueryCurrentChat(""), "switch_inline_query_current_chat"),
])
def test_button_has_exactly_one_action(kind, key):
    data = InlineKeyboardButtonSchema().dump(InlineKeyboardButton(text="Go", kind=kind))

    assert data == {"text": "Go", key: kind.data}
    assert ACTION_KEYS & data.keys() == {key}


def test_raw_record_sets_one_slot():
    raw = InlineKeyboardButton(text="A", kind=SwitchInlineQuery("q")).to_raw()

    assert raw.switch_inline_query == "q"
    assert raw.url is None
    assert raw.callback_data is None
    assert raw.switch_inline_query_current_chat is None


def test_unknown_kind_is_rejected():
    with pytest.raises(TypeError):
        InlineKeyboardButton(text="A", kind="cb1").to_raw()


def test_single_callback_button():
    markup = InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text="A", kind=CallbackData("cb1"))]])

    assert InlineKeyboardMarkupSchema().dump(markup) == {
        "inline_keyboard": [[{"text": "A", "callback_data": "cb1"}]]
    }


def test_rows_and_buttons_keep_order():
    markup = InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton("1", CallbackData("a")), InlineKeyboardButton("2", Url("https://b"))],
        [InlineKeyboardButton("3", SwitchInlineQuery("c")), InlineKeyboardButton("4", CallbackData("d"))],
    ])

    assert InlineKeyboardMarkupSchema().dump(markup) == {
        "inline_keyboard": [
            [{"text": "1", "callback_data": "a"}, {"text": "2", "url": "https://b"}],
            [{"text": "3", "switch_inline_query": "c"}, {"text": "4", "callback_data": "d"}],
        ]
    }


def test_empty_inline_keyboard():
    assert InlineKeyboardMarkupSchema().dump(InlineKeyboardMarkup()) == {"inline_keyboard": []}


def test_changing_source_rows_does_not_change_markup():
    rows = [[InlineKeyboardButton("A", CallbackData("cb1"))]]
    markup = InlineKeyboardMarkup(inline_keyboard=rows)

    rows.append([InlineKeyboardButton("B", CallbackData("cb2"))])
    rows[0].append(InlineKeyboardButton("C", CallbackData("cb3")))

    assert InlineKeyboardMarkupSchema().dump(markup) == {
        "inline_keyboard": [[{"text": "A", "callback_data": "cb1"}]]
    }
