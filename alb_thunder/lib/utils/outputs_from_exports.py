from dataclasses import fields, is_dataclass
from typing import Any

from pulumi import Output, get_stack


def to_outputs(val: Any) -> Any:
    """Recursively convert dataclasses into dicts Pulumi can serialize"""
    if isinstance(val, (list, tuple)):
        return [to_outputs(v) for v in val]
    elif isinstance(val, dict):
        return {k: to_outputs(v) for k, v in val.items()}
    elif is_dataclass(val) and not isinstance(val, type):
        return {f.name: to_outputs(getattr(val, f.name)) for f in fields(val)}
    elif isinstance(val, Output):
        return val
    elif isinstance(val, type):
        raise TypeError(f"Unexpected value '{val}' of type '{type(val)}'")
    else:
        return val


def outputs_from_exports(exports: object) -> dict:
    """Generate a serializable output from a module exports object

    Recursively converts dataclasses to dicts, keyed under the active stack name.

    :param exports: A module exports object, usually a dataclass instance
    :return: The outputs for the module
    """
    return {
        get_stack(): to_outputs(exports),
    }
