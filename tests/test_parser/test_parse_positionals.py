import pytest

from argtree import Command, Option, ParseConfig, Value, parse_args
from argtree.exceptions import (
    ArityError,
    ClassificationError,
    CommandNotInitializedError,
    TooManyValuesError,
    UnexpectedArgumentError,
    UnrecognizedOptionError,
)


def make_calc() -> Command:
    return Command(
        name="calc",
        opts=[
            Option(
                name="offset",
                short_name="o",
                long_name="offset",
                val=Value.of_type(int, name="amount", default_val=0),
            )
        ],
        vals=[Value.of_type(int, name="a"), Value.of_type(float, name="b")],
    ).init()


def test_values_fill_in_declaration_order():
    calc = make_calc()
    calc.parse(["1", "2.5"])
    vals = calc.get_vals()
    assert vals["a"].get() == 1
    assert vals["b"].get() == 2.5


def test_negative_numbers_are_positional():
    calc = make_calc()
    calc.parse(["-5", "--offset", "-3", "-.5"])
    assert calc.get_vals()["a"].get() == -5
    assert calc.get_vals()["b"].get() == -0.5
    assert calc.get_opts()["offset"].get() == -3


def test_negative_number_without_open_value_is_unrecognized():
    calc = make_calc()
    with pytest.raises(UnrecognizedOptionError):
        calc.parse(["1", "2", "-3"])


def test_too_many_values():
    calc = make_calc()
    with pytest.raises(TooManyValuesError) as exc_info:
        calc.parse(["1", "2", "3"])
    assert exc_info.value.token == "3"
    assert isinstance(exc_info.value, ArityError)
    assert isinstance(exc_info.value, ClassificationError)


def test_unexpected_argument_without_values():
    cmd = Command(name="status").init()
    with pytest.raises(UnexpectedArgumentError):
        cmd.parse(["now"])


def test_multi_value_absorbs_tokens_until_maxed():
    cmd = Command(
        name="copy",
        vals=[
            Value.of_type(str, name="sources", set_behavior="multi", max_args=2),
            Value.of_type(str, name="dest"),
        ],
    ).init()
    cmd.parse(["a.txt", "b.txt", "out/"])
    assert cmd.get_vals()["sources"].get_all() == ["a.txt", "b.txt"]
    assert cmd.get_vals()["dest"].get() == "out/"


def test_delimited_token_seeds_several_slots():
    cmd = Command(
        name="sum",
        vals=[
            Value.of_type(int, name="nums", set_behavior="multi", max_args=4),
            Value.of_type(str, name="label"),
        ],
    ).init()
    cmd.parse(["1,2,3,4", "total"])
    assert cmd.get_vals()["nums"].get_all() == [1, 2, 3, 4]
    assert cmd.get_vals()["label"].get() == "total"


def test_sub_command_beats_value():
    cmd = Command(
        name="tool",
        sub_cmds=[Command(name="run")],
        vals=[Value.of_type(str, name="word")],
        sub_cmds_mandatory=False,
        vals_mandatory=False,
    ).init()
    cmd.parse(["run"])
    assert cmd.check_sub_cmd("run")
    assert not cmd.get_vals()["word"].is_set


def test_sub_command_consumes_remaining_tokens():
    cmd = Command(
        name="tool",
        sub_cmds=[Command(name="run", vals=[Value.of_type(str, name="script")])],
        vals=[Value.of_type(str, name="word")],
        sub_cmds_mandatory=False,
    ).init()
    cmd.parse(["hello", "run", "main.py"])
    assert cmd.get_vals()["word"].get() == "hello"
    assert cmd.match_sub_cmd("run").get_vals()["script"].get() == "main.py"


def test_sub_command_options_are_scoped():
    cmd = Command(
        name="tool",
        opts=[Option(name="force", short_name="f", long_name="force")],
        sub_cmds=[Command(name="run")],
    ).init()
    with pytest.raises(UnrecognizedOptionError):
        cmd.parse(["run", "--force"])


def test_lone_dash_is_positional():
    cmd = Command(name="cat", vals=[Value.of_type(str, name="path")]).init()
    cmd.parse(["-"])
    assert cmd.get_vals()["path"].get() == "-"


def test_skip_exe_name_arg():
    calc = make_calc()
    calc.parse(["calc", "1", "2"], ParseConfig(skip_exe_name_arg=True))
    assert calc.get_vals()["a"].get() == 1


def test_parse_accepts_any_iterable():
    calc = make_calc()
    parse_args(iter(["4", "5"]), calc)
    assert calc.get_vals()["b"].get() == 5.0


def test_active_chain():
    cmd = Command(
        name="tool",
        sub_cmds=[Command(name="db", sub_cmds=[Command(name="migrate")])],
    ).init()
    cmd.parse(["db", "migrate"])
    assert [active.name for active in cmd.active_chain()] == ["tool", "db", "migrate"]


def test_parse_requires_init():
    with pytest.raises(CommandNotInitializedError):
        Command(name="tool").parse([])


def test_failed_parse_keeps_partial_state():
    calc = make_calc()
    with pytest.raises(TooManyValuesError):
        calc.parse(["1", "2", "3"])
    assert calc.get_vals()["a"].get() == 1
