import json
from logging import getLogger

from replymarkup.config import EncoderConfig, base_config_path, setup_config
from replymarkup.markup.dataclasses import ReplyMarkup
from replymarkup.markup.schemes import dump_reply_markup


class MarkupEncoder:
    def __init__(self, config: EncoderConfig | None = None):
        self.config = config or EncoderConfig()
        self.logger = getLogger("markup")

    @classmethod
    def from_config(cls, config_path: str = base_config_path) -> "MarkupEncoder":
        """Создаёт кодировщик с секцией encoder из YAML-конфига"""
        return cls(setup_config(config_path).encoder)

    def dump(self, value) -> dict:
        markup = ReplyMarkup.from_value(value)
        data = dump_reply_markup(markup)
        self.logger.debug("encoded %s: %s", markup.kind.value, data)
        return data

    def dumps(self, value) -> str:
        """Кодирует разметку в JSON-строку для параметра reply_markup"""
        separators = (",", ":") if self.config.compact else None
        return json.dumps(self.dump(value), ensure_ascii=self.config.ensure_ascii, separators=separators)
