from dataclasses import dataclass, field

import pytest

from alb_thunder.lib.utils import to_outputs


@dataclass
class Inner:
    name: str


@dataclass
class Exports:
    inner: Inner
    names: list[str] = field(default_factory=list)
    extra: tuple = ()


def test_dataclasses_become_dicts():
    exports = Exports(inner=Inner(name="a"), names=["x", "y"], extra=(Inner(name="b"),))

    assert to_outputs(exports) == {"inner": {"name": "a"}, "names": ["x", "y"], "extra": [{"name": "b"}]}


def test_types_are_rejected():
    with pytest.raises(TypeError):
        to_outputs({"cls": Inner})
