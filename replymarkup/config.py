import os.path
from dataclasses import dataclass, field
from logging import getLogger

import yaml

base_config_path = os.path.join(os.path.dirname(os.path.dirname(os.path.realpath(__file__))), "config.yml")


@dataclass
class EncoderConfig:
    ensure_ascii: bool = False
    compact: bool = True


@dataclass
class Config:
    encoder: EncoderConfig = field(default_factory=EncoderConfig)


def setup_config(config_path: str = base_config_path) -> Config:
    with open(config_path, "r") as f:
        raw_config = yaml.safe_load(f) or {}

    getLogger("config").info("config loaded from %s", config_path)
    return Config(
        encoder=EncoderConfig(**(raw_config.get("encoder") or {})),
    )
