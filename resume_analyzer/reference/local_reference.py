from __future__ import annotations

import json
from pathlib import Path

from .models import ReferenceData

_DEFAULT_PATH = Path(__file__).with_name("reference_data.json")


def load_reference_data(path: str | Path | None = None) -> ReferenceData:
    source = Path(path) if path else _DEFAULT_PATH
    with source.open("r", encoding="utf-8") as handle:
        raw = json.load(handle)
    return ReferenceData.model_validate(raw)
