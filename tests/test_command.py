import pytest

from argtree import Command, CommandConfig, InitConfig, Option, Value, ValueConfig
from argtree.exceptions import CommandNotInitializedError, SchemaError


def make_setup_cmd() -> Command:
    return Command(
        name="forge",
        description="Build tool.",
        opts=[
            Option(
                name="jobs",
                short_name="j",
                long_name="jobs",
                val=Value.of_type(int, name="count", set_behavior="multi", max_args=12),
            )
        ],
        sub_cmds=[Command(name="build", vals=[Value.of_type(str, name="profile")])],
    )


def test_init_adds_reserved_commands_and_options():
    forge = make_setup_cmd().init(
        CommandConfig(value_config=ValueConfig(max_children=12))
    )
    assert forge.is_init
    assert forge.sub_cmd_names(include_reserved=True) == ["build", "usage", "help"]
    opts = forge.get_opts()
    assert list(opts) == ["jobs", "usage", "help"]
    assert opts["help"].short_name == "h"
    assert opts["usage"].long_name == "usage"
    assert opts["help"].val.name == "help_flag"
    build = forge.get_sub_cmd("build")
    assert build.is_init
    assert build.sub_cmd_names(include_reserved=True) == ["usage", "help"]


def test_init_leaves_declaration_untouched():
    setup_cmd = make_setup_cmd()
    forge = setup_cmd.init(CommandConfig(value_config=ValueConfig(max_children=12)))
    assert not setup_cmd.is_init
    assert setup_cmd.sub_cmd_names(include_reserved=True) == ["build"]
    forge.parse(["build", "debug"])
    assert not setup_cmd.sub_cmds[0].vals[0].is_set
    assert forge.get_sub_cmd("build").get_vals()["profile"].get() == "debug"


def test_init_can_be_repeated():
    setup_cmd = Command(name="greet", vals=[Value.of_type(str, name="who")])
    first = setup_cmd.init()
    second = setup_cmd.init()
    first.parse(["ann"])
    second.parse(["bob"])
    assert first.get_vals()["who"].get() == "ann"
    assert second.get_vals()["who"].get() == "bob"


def test_init_binds_config_everywhere():
    config = CommandConfig(value_config=ValueConfig(max_children=12))
    forge = make_setup_cmd().init(config)
    assert forge.config is config
    assert forge.get_sub_cmd("build").config is config
    assert forge.get_opts()["jobs"].val.config is config.value_config
    assert forge.get_sub_cmd("build").get_vals()["profile"].config is config.value_config


def test_init_checks_value_capacity():
    with pytest.raises(SchemaError):
        make_setup_cmd().init()


def test_init_without_help():
    forge = make_setup_cmd().init(
        CommandConfig(value_config=ValueConfig(max_children=12)),
        InitConfig(add_help_cmds=False, add_help_opts=False),
    )
    assert forge.sub_cmd_names(include_reserved=True) == ["build"]
    assert list(forge.get_opts()) == ["jobs"]


def test_init_without_sub_command_init():
    forge = make_setup_cmd().init(
        CommandConfig(value_config=ValueConfig(max_children=12)),
        InitConfig(init_subcmds=False),
    )
    assert not forge.get_sub_cmd("build").is_init


@pytest.mark.parametrize(
    "cmd",
    [
        lambda: Command(name="x", sub_cmds=[Command(name="a"), Command(name="a")]),
        lambda: Command(
            name="x",
            opts=[
                Option(name="a", long_name="alpha"),
                Option(name="a", long_name="apple"),
            ],
        ),
        lambda: Command(
            name="x",
            opts=[
                Option(name="a", short_name="a"),
                Option(name="b", short_name="a"),
            ],
        ),
        lambda: Command(
            name="x",
            opts=[
                Option(name="a", long_name="same"),
                Option(name="b", long_name="same"),
            ],
        ),
        lambda: Command(
            name="x",
            vals=[Value.of_type(str, name="v"), Value.of_type(int, name="v")],
        ),
        lambda: Command(name="x", sub_cmds=[Command(name="help")]),
        lambda: Command(name="x", opts=[Option(name="verbose", short_name="h")]),
        lambda: Command(name="x", opts=[Option(name="usage", long_name="show-usage")]),
    ],
)
def test_init_rejects_invalid_trees(cmd):
    with pytest.raises(SchemaError):
        cmd().init()


def test_reserved_names_allowed_without_help():
    cmd = Command(
        name="x",
        sub_cmds=[Command(name="help")],
        opts=[Option(name="verbose", short_name="h")],
    ).init(init_config=InitConfig(add_help_cmds=False, add_help_opts=False))
    assert cmd.get_sub_cmd("help") is not None


def test_max_args_per_list():
    cmd = Command(name="x", sub_cmds=[Command(name=f"c{idx}") for idx in range(4)])
    with pytest.raises(SchemaError):
        cmd.init(CommandConfig(max_args=3))
    assert cmd.init(CommandConfig(max_args=4)).is_init


def test_cycles_are_rejected():
    parent = Command(name="parent")
    child = Command(name="child", sub_cmds=[parent])
    parent.sub_cmds = [child]
    with pytest.raises(SchemaError):
        parent.init()


def test_validate_can_be_skipped():
    cmd = Command(name="x", sub_cmds=[Command(name="a"), Command(name="a")])
    initialized = cmd.init(init_config=InitConfig(validate_cmd=False))
    assert initialized.is_init


def test_command_requires_name_and_typed_children():
    with pytest.raises(SchemaError):
        Command(name="")
    with pytest.raises(SchemaError):
        Command(name="x", opts=[Value.of_type(str, name="v")])


def test_lookups_require_init():
    cmd = Command(name="x", vals=[Value.of_type(str, name="v")])
    with pytest.raises(CommandNotInitializedError):
        cmd.get_vals()
    with pytest.raises(CommandNotInitializedError):
        cmd.get_opts()


def test_sub_command_lookups():
    cmd = Command(name="x", sub_cmds=[Command(name="a"), Command(name="b")]).init()
    assert cmd.get_sub_cmd("b").name == "b"
    assert cmd.get_sub_cmd("z") is None
    cmd.parse(["b"])
    assert cmd.check_sub_cmd("b")
    assert not cmd.check_sub_cmd("a")
    assert cmd.match_sub_cmd("a") is None
    assert cmd.match_sub_cmd("b") is cmd.active_sub_cmd


def test_check_flag_reads_bool_values():
    cmd = Command(
        name="x",
        vals=[Value.of_type(bool, name="dry_run"), Value.of_type(str, name="word")],
    ).init()
    cmd.parse(["yes", "hello"])
    assert cmd.check_flag("dry_run")
    assert not cmd.check_flag("word")


def test_reset_clears_parse_state():
    cmd = Command(
        name="x",
        opts=[Option(name="force", short_name="f", long_name="force")],
        sub_cmds=[Command(name="run", vals=[Value.of_type(str, name="script")])],
    ).init()
    cmd.parse(["-f", "run", "main.py"])
    cmd.reset()
    assert cmd.active_sub_cmd is None
    assert not cmd.check_flag("force")
    assert not cmd.get_sub_cmd("run").get_vals()["script"].is_set
    cmd.parse(["run", "other.py"])
    assert cmd.match_sub_cmd("run").get_vals()["script"].get() == "other.py"


def test_help_prefix_falls_back_to_config():
    cmd = Command(name="x").init(CommandConfig(global_help_prefix="My Tool"))
    assert cmd.prefix == "My Tool"
    own = Command(name="y", help_prefix="Other").init(
        CommandConfig(global_help_prefix="My Tool")
    )
    assert own.prefix == "Other"


def test_init_rejects_multi_arg_value_without_multi():
    setup_cmd = Command(
        name="copy",
        vals=[
            Value.of_type(str, name="sources", max_args=2),
            Value.of_type(str, name="dest"),
        ],
    )
    with pytest.raises(SchemaError):
        setup_cmd.init()
