from marshmallow import Schema, fields, post_dump, pre_dump

from replymarkup.markup.dataclasses import InlineKeyboardButton, ReplyMarkup, ReplyMarkupKind


class SkippingSchema(Schema):
    skip_if_false: tuple[str, ...] = ()
    skip_if_none: tuple[str, ...] = ()

    @post_dump
    def skip_defaults(self, data: dict, **kwargs) -> dict:
        for name in self.skip_if_false:
            if not data.get(name):
                data.pop(name, None)
        for name in self.skip_if_none:
            if data.get(name) is None:
                data.pop(name, None)
        return data


class InlineKeyboardButtonSchema(SkippingSchema):
    skip_if_none = ("url", "callback_data", "switch_inline_query", "switch_inline_query_current_chat")

    text = fields.Str(required=True)
    url = fields.Str(required=False)
    callback_data = fields.Str(required=False)
    switch_inline_query = fields.Str(required=False)
    switch_inline_query_current_chat = fields.Str(required=False)

    @pre_dump
    def flatten(self, button: InlineKeyboardButton, **kwargs):
        return button.to_raw()


class InlineKeyboardMarkupSchema(Schema):
    inline_keyboard = fields.List(fields.Nested(InlineKeyboardButtonSchema, many=True), required=True)


class KeyboardButtonSchema(SkippingSchema):
    skip_if_false = ("request_contact", "request_location")

    text = fields.Str(required=True)
    request_contact = fields.Bool(required=False)
    request_location = fields.Bool(required=False)


class ReplyKeyboardMarkupSchema(SkippingSchema):
    skip_if_false = ("resize_keyboard", "one_time_keyboard", "selective")

    keyboard = fields.List(fields.Nested(KeyboardButtonSchema, many=True), required=True)
    resize_keyboard = fields.Bool(required=False)
    one_time_keyboard = fields.Bool(required=False)
    selective = fields.Bool(required=False)


class ReplyKeyboardRemoveSchema(SkippingSchema):
    skip_if_false = ("selective",)

    remove_keyboard = fields.Constant(True)
    selective = fields.Bool(required=False)


class ForceReplySchema(SkippingSchema):
    skip_if_false = ("selective",)

    force_reply = fields.Constant(True)
    selective = fields.Bool(required=False)


SCHEMAS: dict[ReplyMarkupKind, type[Schema]] = {
    ReplyMarkupKind.INLINE_KEYBOARD: InlineKeyboardMarkupSchema,
    ReplyMarkupKind.REPLY_KEYBOARD: ReplyKeyboardMarkupSchema,
    ReplyMarkupKind.REPLY_KEYBOARD_REMOVE: ReplyKeyboardRemoveSchema,
    ReplyMarkupKind.FORCE_REPLY: ForceReplySchema,
}


def dump_reply_markup(value) -> dict:
    markup = ReplyMarkup.from_value(value)
    return SCHEMAS[markup.kind]().dump(markup.value)


class ReplyMarkupField(fields.Field):
    """Поле reply_markup для схем исходящих запросов"""

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return dump_reply_markup(value)
