"""Run the CLI with `python -m starbuero`."""

from __future__ import annotations

import sys

# Windows terminals default to cp1252; the CLI prints umlauts.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from starbuero.cli.main import run  # noqa: E402


def main() -> None:
    run()


if __name__ == "__main__":
    main()
