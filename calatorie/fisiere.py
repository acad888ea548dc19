"""Locating and reading the game's JSON data files."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, TextIO


def _cai_posibile(nume: str) -> list[str]:
    return [nume, f"resurse/{nume}", f"../resurse/{nume}"]


def deschide_fisier_json(nume: str, iesire: TextIO | None = None) -> TextIO:
    """Open ``nume`` from the working directory or a nearby ``resurse`` folder.

    The first readable candidate wins. Raises FileNotFoundError when none
    of them can be opened.
    """
    for cale in _cai_posibile(nume):
        try:
            fisier = open(cale, encoding="utf-8")
        except OSError:
            continue
        print(
            f"[OK] Deschis fisier: {cale}",
            file=iesire if iesire is not None else sys.stdout,
        )
        return fisier

    print(f"[Eroare] Nu s-a putut deschide fișierul {nume}", file=sys.stderr)
    print(f"[DEBUG] current_path(): {Path.cwd()}", file=sys.stderr)
    raise FileNotFoundError(f"Nu s-a putut deschide fișierul {nume}")


def incarca_json(nume: str, iesire: TextIO | None = None) -> Any:
    """Find ``nume`` as deschide_fisier_json does and parse it as JSON."""
    with deschide_fisier_json(nume, iesire) as fisier:
        return json.load(fisier)