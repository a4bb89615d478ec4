from __future__ import annotations

import sys
from pathlib import Path

_core_src = Path(__file__).resolve().parents[1] / "src"
if _core_src.is_dir() and str(_core_src) not in sys.path:
    sys.path.insert(0, str(_core_src))
