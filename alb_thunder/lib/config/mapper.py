import json
import logging
from collections.abc import Mapping
from dataclasses import fields
from typing import Type, Any, Optional

from dacite import from_dict, Config as DaciteConfig, MissingValueError
from pulumi import Config, log

from alb_thunder.lib.base import ConfigType
from .hierarchical import ControllerConfigException

logger = logging.getLogger(__name__)


def _parse_args_value(value: Any) -> Any:
    """Parse and return json values if valid json, else return original value

    :param value: A potential json string
    :return: Parsed json object or raw arg
    """
    try:
        return json.loads(value)
    except (json.decoder.JSONDecodeError, TypeError):
        return value


def config_from_dict(data: Mapping, config_cls: Type[ConfigType]) -> ConfigType:
    """Map a raw config dict onto a config dataclass

    Uses `dacite <https://github.com/konradhalas/dacite>`_ in strict mode, so unknown keys are rejected.

    :param data: Raw config values
    :param config_cls: The dataclass for the config
    :return: The config expressed as ``config_cls``
    """
    try:
        config = from_dict(
            data_class=config_cls,
            data=dict(data),
            config=DaciteConfig(strict=True),
        )
    except MissingValueError as e:
        raise ControllerConfigException(e.field_path) from e

    logger.debug("mapped %s onto %s", dict(data), config)

    return config


def get_raw_stack_config(stack: str, config_cls: Type[ConfigType]) -> dict:
    """Read every field of ``config_cls`` from the stack's Pulumi config namespace

    Values are set with ``pulumi config set <stack>:<field> <value>``. JSON values are decoded so booleans and
    numbers come through typed.

    :param stack: Name of the stack, used as the config namespace
    :param config_cls: The dataclass for the config
    :return: dict
    """
    stack_config = Config(stack)

    config = {}
    for f in fields(config_cls):
        value = stack_config.get(f.name)
        if value is not None:
            # string fields stay raw so versions like `1.4` are not turned into floats
            config[f.name] = value if f.type in (str, Optional[str]) else _parse_args_value(value)

    log.debug(f"config dict for stack `{stack}` is {config}")

    return config


def get_stack_config(stack: str, config_cls: Type[ConfigType]) -> ConfigType:
    """Get a stack config in dataclass form

    :param stack: Name of the stack
    :param config_cls: The dataclass for the config
    :return: The stack config expressed in the module's config dataclass
    """
    config = config_from_dict(get_raw_stack_config(stack, config_cls), config_cls)

    log.debug(f"config for stack `{stack}` is {config}")

    return config
