"""Entry point for `python -m chromarole`."""

import sys


def main():
    from chromarole.app import run_cli
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
