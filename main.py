"""Run the `pact` CLI from a source checkout: `python -m main channels list 42`.

Puts `src/` on `sys.path` so the SDK is importable without `pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from pact.cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
