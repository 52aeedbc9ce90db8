from dataclasses import is_dataclass
from typing import Any

from pulumi import Output


def _map_dict(val: dict) -> dict:
    return {k: _map(v) for k, v in val.items()}


def _map(val: Any) -> Any:
    if isinstance(val, list):
        return [_map(v) for v in val]
    elif isinstance(val, dict):
        return _map_dict(val)
    elif is_dataclass(val) and not isinstance(val, type):
        return _map_dict(val.__dict__)
    elif isinstance(val, Output):
        return val
    elif isinstance(val, type):
        raise TypeError(f"Unexpected value '{val}' of type '{type(val)}'")
    else:
        return val


def outputs_from_exports(exports: object) -> Any:
    """Generate a serializable output from a lookup result

    Recursively converts dataclasses to dict.

    :param exports: A dataclass instance, or lists and dicts of them
    :return: The serializable output
    """
    return _map(exports)
