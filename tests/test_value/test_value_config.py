import pytest

from argtree.exceptions import SchemaError
from argtree.value import SetBehavior, ValueConfig, custom_type


def test_value_config_defaults():
    config = ValueConfig()
    assert config.global_set_behavior is SetBehavior.LAST
    assert config.global_arg_delims == ",;"
    assert config.max_children == 10


def test_value_config_coerces_set_behavior():
    assert ValueConfig(global_set_behavior="append").global_set_behavior is (
        SetBehavior.MULTI
    )


@pytest.mark.parametrize(
    "kwargs",
    [
        {"global_set_behavior": "never"},
        {"max_children": 0},
        {"custom_types": {"other": custom_type("point", tuple)}},
    ],
)
def test_value_config_rejects_bad_settings(kwargs):
    with pytest.raises(SchemaError):
        ValueConfig(**kwargs)


def test_register_parse_fn_for_unknown_type():
    with pytest.raises(SchemaError):
        ValueConfig().register_parse_fn("point", str)
