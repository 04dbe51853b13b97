from __future__ import annotations
from pathlib import Path
import sys

def frozen_base_dir() -> Path:
    # When packaged with PyInstaller --onefile, data is unpacked to sys._MEIPASS
    if hasattr(sys, "_MEIPASS"):
        return Path(sys._MEIPASS) / "dndsheet"  # type: ignore[attr-defined]
    # dev / installed mode: src/dndsheet
    return Path(__file__).resolve().parent.parent

def content_dir() -> Path:
    # Race and class tables ship as package data under dndsheet/content
    return frozen_base_dir() / "content"
