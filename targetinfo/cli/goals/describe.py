import json
import sys
from typing import NoReturn

from libtargetinfo.targets.target import Target
from targetinfo.cli.goals._target import cli_resolve_target
from targetinfo.cli.parser.arguments import CLIArguments


def cli_perform_describe_goal(args: CLIArguments) -> NoReturn:
    """Perform describe goal that display whole information about target."""
    target = cli_resolve_target(args)

    match args.output_format:
        case "json":
            print(json.dumps(target_to_json(target), indent=2))
        case "text":
            print("[Target]")
            print(f"\tArchitecture: {target.architecture}")
            print(f"\tVendor: {target.vendor}")
            print(f"\tOS: {target.operating_system}")
            print(f"\tEnvironment: {target.environment or '(none)'}")
            print(f"\tEndianness: {target.endianness}")
            print(f"\tPointer width: {target.pointer_width}")
            print(f"\tFamily: {target.family or '(none)'}")
    return sys.exit(0)


def target_to_json(target: Target) -> dict[str, str]:
    """Target description as JSON object, keys are conditional compilation ones."""
    return {
        "target_arch": target.architecture,
        "target_vendor": target.vendor,
        "target_os": target.operating_system,
        "target_env": target.environment,
        "target_endian": target.endianness,
        "target_pointer_width": target.pointer_width,
        "target_family": target.family,
    }
