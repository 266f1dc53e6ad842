import io

import pytest
from rich.console import Console

from argtree import Command, CommandConfig, Option, ParseConfig, Value
from argtree.exceptions import MissingSubCommandError, MissingValueError


def make_forge(**root_kwargs) -> Command:
    return Command(
        name="forge",
        sub_cmds=[
            Command(
                name="build",
                description="Compile the project.",
                opts=[
                    Option(
                        name="target",
                        short_name="t",
                        long_name="target",
                        val=Value.of_type(str, name="triple"),
                    )
                ],
                vals=[Value.of_type(str, name="profile")],
            ),
            Command(name="clean"),
        ],
        **root_kwargs,
    ).init()


def test_missing_sub_command():
    with pytest.raises(MissingSubCommandError) as exc_info:
        make_forge().parse([])
    assert exc_info.value.argument == "forge"


def test_optional_sub_command():
    forge = make_forge(sub_cmds_mandatory=False)
    forge.parse([])
    assert forge.active_sub_cmd is None


def test_sub_cmds_mandatory_from_config():
    forge = Command(name="forge", sub_cmds=[Command(name="clean")]).init(
        CommandConfig(sub_cmds_mandatory=False)
    )
    forge.parse([])
    assert forge.active_sub_cmd is None


def test_missing_value():
    with pytest.raises(MissingValueError) as exc_info:
        make_forge().parse(["build"])
    assert exc_info.value.argument == "profile"


def test_missing_value_allowed_by_parse_config():
    forge = make_forge()
    forge.parse(["build"], ParseConfig(vals_mandatory=False))
    assert not forge.active_sub_cmd.get_vals()["profile"].is_set


def test_vals_mandatory_false_on_command():
    cmd = Command(
        name="greet", vals=[Value.of_type(str, name="who")], vals_mandatory=False
    ).init()
    cmd.parse([])
    assert not cmd.get_vals()["who"].is_set


def test_default_satisfies_mandatory_value():
    cmd = Command(
        name="greet", vals=[Value.of_type(str, name="who", default_val="world")]
    ).init()
    cmd.parse([])
    assert cmd.get_vals()["who"].get() == "world"


def test_parse_config_cannot_force_values_on_optional_command():
    cmd = Command(
        name="greet", vals=[Value.of_type(str, name="who")], vals_mandatory=False
    ).init()
    cmd.parse([], ParseConfig(vals_mandatory=True))


def test_reserved_commands_do_not_count_as_sub_commands():
    cmd = Command(name="status").init()
    assert cmd.sub_cmd_names(include_reserved=True) == ["usage", "help"]
    cmd.parse([])


@pytest.mark.parametrize(
    "tokens",
    [
        ["--help"],
        ["-h"],
        ["--usage"],
        ["-u"],
        ["help"],
        ["usage"],
        ["build", "help"],
        ["build", "--help"],
        ["build", "-u"],
        ["--help", "build"],
    ],
)
def test_usage_help_skips_mandatory_checks(tokens):
    forge = make_forge()
    forge.parse(tokens)
    assert any(
        cmd.check_flag("help") or cmd.check_flag("usage")
        for cmd in forge.active_chain()
    )


def test_auto_handle_help_renders_and_returns():
    console = Console(file=io.StringIO(), width=120)
    forge = make_forge()
    result = forge.parse(
        ["build", "--help"], ParseConfig(auto_handle_usage_help=True), console
    )
    assert result is forge
    output = console.file.getvalue()
    assert "HELP:" in output
    assert "COMMAND: build" in output
    assert "DESCRIPTION: Compile the project." in output


def test_auto_handle_usage_renders_innermost_request():
    console = Console(file=io.StringIO(), width=120)
    forge = make_forge()
    forge.parse(["build", "usage"], ParseConfig(auto_handle_usage_help=True), console)
    output = console.file.getvalue()
    assert output.startswith("USAGE: build")
    assert "HELP:" not in output


def test_usage_help_is_not_rendered_without_auto_handle():
    console = Console(file=io.StringIO(), width=120)
    forge = make_forge()
    forge.parse(["--help"], console=console)
    assert console.file.getvalue() == ""
    assert forge.check_usage_help(console)
    assert "HELP:" in console.file.getvalue()
