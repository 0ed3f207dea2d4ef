"""Load forth_lang configuration"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

import toml

from .config_classes import EvaluatorConfig
from .exceptions import UserResolvableError

LOG = logging.getLogger(__name__)

DEFAULT_CONFIG_FILEPATH = Path("forth.toml")


class ConfigError(UserResolvableError):
    """Error loading configuration"""


@dataclass
class Config:
    config_file: Union[Path, None] = None
    evaluator: EvaluatorConfig = field(default_factory=EvaluatorConfig)


def load(path=None, missing_ok: bool = False) -> Config:
    """Load the configuration from a TOML file"""
    config_file = Path(path) if path else DEFAULT_CONFIG_FILEPATH

    try:
        data = toml.load(config_file)
    except FileNotFoundError:
        if missing_ok:
            LOG.debug("%s not found, using defaults", config_file)
            return Config()
        raise ConfigError(
            f"{config_file} not found",
            "Create it, or construct the evaluator without a configuration.",
        )
    except toml.TomlDecodeError as exc:
        raise ConfigError(f"{config_file} is not valid TOML", str(exc)) from exc

    return from_dict(data, config_file)


def from_dict(data: dict, config_file=None) -> Config:
    """Build a Config from already-parsed TOML data"""
    data = dict(data)
    section = data.pop("evaluator", {})
    if data:
        raise ConfigError(
            f"Unknown section(s) in {config_file or 'configuration'}: "
            + ", ".join(sorted(data)),
            "The only supported section is [evaluator].",
        )

    try:
        evaluator = EvaluatorConfig(**section)
    except TypeError as exc:
        raise ConfigError(
            f"Bad [evaluator] section in {config_file or 'configuration'}",
            "Supported keys: cell_bits.",
        ) from exc
    except ValueError as exc:
        raise ConfigError(str(exc), "Use a cell width of at least 16 bits.") from exc

    LOG.debug("Loaded configuration %s", evaluator)
    return Config(config_file=config_file, evaluator=evaluator)
