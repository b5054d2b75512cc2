#!/usr/bin/env python3
"""Example: the "copy" command from the shellarg documentation.

    python examples/copy_command.py ./my-files/important.txt ./backups
    python examples/copy_command.py -r ./my-files ./backups
    python examples/copy_command.py -r -z myzip.zip ./my-files ./backups

Running "python examples/copy_command.py -z ./my-files ./backups" fails,
since -z is an input option and nothing is left to use as its value.
"""

import sys

from shellarg import CommandLineArguments, OptionKind, ParseError


def main() -> int:
    args = CommandLineArguments()
    args.add_parameters(["source", "destination"])
    args.add_options({
        "r": OptionKind.SWITCH,  # recursively copy
        "z": OptionKind.INPUT,  # zip the files to a location
    })

    try:
        args.parse(sys.argv)
    except ParseError as e:
        print(f"copy: {e}", file=sys.stderr)
        print("usage: copy_command.py [-r] [-z zipfile] source destination", file=sys.stderr)
        return 2

    source = args.get_parameter("source")
    destination = args.get_parameter("destination")
    mode = "recursively " if args.get_option("r") else ""
    print(f"Would {mode}copy {source} to {destination}")

    zip_file = args.get_option("z")
    if zip_file is not None:
        print(f"Would zip the copy to {zip_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
