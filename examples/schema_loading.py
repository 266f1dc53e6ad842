import sys

from argtree import ParseConfig
from argtree.config import load_schema
from argtree.mapping import command_to_dict
from argtree.utils import setup_logging

setup_logging()

setup_cmd, config = load_schema("forge.yaml")
forge = setup_cmd.init(config)

if __name__ == "__main__":
    forge.parse(sys.argv[1:], ParseConfig(auto_handle_usage_help=True))
    print(command_to_dict(forge))
