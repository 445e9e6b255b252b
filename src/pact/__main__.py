"""`python -m pact`: run the Pact command line."""

from __future__ import annotations

import sys

# Windows consoles default to cp1252; channel names and JSON output are UTF-8.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from pact.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
