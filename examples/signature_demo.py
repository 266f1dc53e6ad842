import sys
from dataclasses import dataclass

from argtree.mapping import (
    call_as,
    command_from_dataclass,
    command_from_func,
    command_to_dataclass,
)


def deploy(service: str, region: str = "us-east-1", verbose: bool = False) -> str:
    if verbose:
        print(f"Deploying {service} to {region}...")
    return f"{service} deployed to {region}"


@dataclass
class Lint:
    paths: list[str]
    fix: bool | None = None


@dataclass
class Tools:
    lint: Lint | None = None
    color: bool | None = None


deploy_cmd = command_from_func(
    deploy,
    descriptions={"service": "Service name", "region": "Deployment region"},
).init()

tools_cmd = command_from_dataclass(Tools, name="tools").init()

if __name__ == "__main__":
    if sys.argv[1:2] == ["tools"]:
        tools_cmd.parse(sys.argv[2:])
        print(command_to_dataclass(tools_cmd, Tools))
    else:
        deploy_cmd.parse(sys.argv[1:])
        print(call_as(deploy_cmd, deploy))
