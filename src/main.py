"""Script de ejecución.

Permite `python -m main` desde `src/` además del script `tempconvert`.
"""

from __future__ import annotations

import sys

# La salida incluye "°C": en consolas Windows (cp1252) forzamos UTF-8.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
