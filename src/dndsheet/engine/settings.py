from __future__ import annotations
from pathlib import Path
from pydantic import BaseModel, Field, model_validator
from typing import Optional

SETTINGS_DIR = Path.home() / ".dndsheet"
SETTINGS_PATH = SETTINGS_DIR / "settings.json"

class Settings(BaseModel):
    point_buy_pool: int = Field(27, ge=0)
    point_buy_floor: int = 8
    point_buy_ceiling: int = 15
    point_buy_threshold: int = 13
    default_score: int = 8
    rng_seed: Optional[int] = None  # None = fresh entropy each run
    sheet_label_width: int = Field(20, ge=1)
    log_file: Path = SETTINGS_DIR / "dndsheet.log"

    @model_validator(mode="after")
    def _check_point_buy_bounds(self) -> Settings:
        if not self.point_buy_floor <= self.point_buy_threshold <= self.point_buy_ceiling:
            raise ValueError("point buy needs floor <= threshold <= ceiling")
        return self

def load_settings(path: Path | None = None) -> Settings:
    path = path or SETTINGS_PATH
    if path.exists():
        return Settings.model_validate_json(path.read_text(encoding="utf-8"))
    s = Settings()
    save_settings(s, path)
    return s

def save_settings(s: Settings, path: Path | None = None) -> None:
    path = path or SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(s.model_dump_json(indent=2), encoding="utf-8")
