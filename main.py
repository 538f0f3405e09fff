"""Entry point de desarrollo (sin instalar el paquete).

Permite ejecutar la CLI con:
- `python -m main tickets get 123`

El código vive en `src/` (layout tipo "src"); sin `pip install -e .` Python no
encuentra `cli`, `core` ni `adapters`, así que los añadimos a `sys.path`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    # Terminales Windows con cp1252 rompen los caracteres de Rich.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
