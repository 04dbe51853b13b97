from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple
import json
import logging
import yaml
from pydantic import TypeAdapter

from .abilities import AbilityName
from .races import ClassDefinition, RaceDefinition

log = logging.getLogger(__name__)

RaceListAdapter = TypeAdapter(List[RaceDefinition])
ClassListAdapter = TypeAdapter(List[ClassDefinition])

def _load_file(path: Path):
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in [".yaml", ".yml"]:
        return yaml.safe_load(text) or []
    return json.loads(text)

def _find(base_dir: Path, stem: str) -> Path:
    for ext in (".yaml", ".yml", ".json"):
        p = base_dir / f"{stem}{ext}"
        if p.exists():
            return p
    raise FileNotFoundError(f"No {stem} table in {base_dir}")

@dataclass
class ContentIndex:
    races: Dict[str, RaceDefinition]
    classes: Dict[str, ClassDefinition]

    def get_race(self, rid: str) -> RaceDefinition:
        return self.races[rid]

    def get_class(self, cid: str) -> ClassDefinition:
        return self.classes[cid]

    def race_bonuses(self, rid: str) -> List[Tuple[AbilityName, int]]:
        return self.races[rid].bonuses()

def _index(entries, kind: str, fp: Path) -> dict:
    out = {}
    for entry in entries:
        if entry.id in out:
            raise RuntimeError(f"Duplicate {kind} id {entry.id} in {fp}")
        out[entry.id] = entry
    return out

def load_content(base_dir: Path) -> ContentIndex:
    fp = _find(base_dir, "races")
    races = _index(RaceListAdapter.validate_python(_load_file(fp)), "race", fp)
    fp = _find(base_dir, "classes")
    classes = _index(ClassListAdapter.validate_python(_load_file(fp)), "class", fp)
    log.info("Loaded %d races and %d classes from %s", len(races), len(classes), base_dir)
    return ContentIndex(races=races, classes=classes)
