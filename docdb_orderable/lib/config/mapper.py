import json
from typing import Type, Any, TypeVar

from dacite import from_dict, Config
from pulumi import log, runtime

ConfigType = TypeVar("ConfigType")


def _parse_args_value(value: Any) -> Any:
    """Parse and return json values if valid json, else return original value

    Numbers are left as strings so engine versions like `4.0` survive.

    :param value: A potential json string
    :return: Parsed json object or raw arg
    """
    try:
        parsed = json.loads(value)
    except (json.decoder.JSONDecodeError, TypeError):
        return value

    if isinstance(parsed, (int, float)) and not isinstance(parsed, bool):
        return value

    return parsed


def get_raw_stack_config(namespace: str) -> dict:
    """Pull the config of a namespace from Pulumi internals, clean it and return in dict form

    This method may break when upgrading the ``pulumi`` python dependency.

    :param namespace: Config namespace
    :return: dict
    """
    prefix = namespace + ":"

    config = {
        k.removeprefix(prefix): _parse_args_value(v) for k, v in runtime.config.CONFIG.items() if k.startswith(prefix)
    }

    log.debug(f"config dict for namespace `{namespace}` is {config}")

    return config


def get_stack_config(namespace: str, config_cls: Type[ConfigType]) -> ConfigType:
    """Get the config of a namespace in dataclass form

    Uses `dacite <https://github.com/konradhalas/dacite>`_ to map dict to dataclass.

    :param namespace: Config namespace
    :param config_cls: The dataclass for the config
    :return: The config expressed in ``config_cls``
    """
    raw_config = get_raw_stack_config(namespace)

    config = from_dict(
        data_class=config_cls,
        data=raw_config,
        config=Config(strict=True),
    )

    log.debug(f"config for namespace `{namespace}` is {config}")

    return config
