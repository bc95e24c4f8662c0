from __future__ import annotations
import sys
from typing import Any

def eprint(*args: Any) -> None:
    print(*args, file=sys.stderr)


def log(area: str, level: str, msg: str) -> None:
    eprint(f"[calgrid.{area}] {level}: {msg}")
