import sys

from argtree import Command, Option, ParseConfig, Value
from argtree.exceptions import CommandArgumentError

setup_cmd = Command(
    name="greet",
    description="Say hello",
    opts=[
        Option(
            name="shout",
            short_name="s",
            long_name="shout",
            description="Print in upper case",
        ),
        Option(
            name="times",
            short_name="n",
            long_name="times",
            val=Value.of_type(int, name="count", default_val=1),
        ),
    ],
    vals=[Value.of_type(str, name="who")],
)

greet = setup_cmd.init()

if __name__ == "__main__":
    try:
        greet.parse(sys.argv, ParseConfig(skip_exe_name_arg=True))
    except CommandArgumentError as error:
        print(error)
        greet.usage()
        sys.exit(2)
    if not greet.check_usage_help():
        message = f"Hello, {greet.get_vals()['who'].get()}!"
        if greet.get_opts()["shout"].get():
            message = message.upper()
        for _ in range(greet.get_opts()["times"].get()):
            print(message)
