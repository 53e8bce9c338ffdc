import argparse

from .cli import MAIN_COMMANDS, run_main


def main() -> int | None:
    parser = argparse.ArgumentParser(description="Show operating system identification from os-release files")
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    parser.add_argument("--debug", action="store_true", help="debugging output")

    subparsers = parser.add_subparsers(help="actions", required=True, dest="command")
    for c in MAIN_COMMANDS:
        c.make_subparser(subparsers)

    args = parser.parse_args()
    handler = args.handler(args)
    return handler.run()


if __name__ == "__main__":
    run_main(main)
