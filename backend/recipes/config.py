from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class StoreConfig:
    seed_samples: bool = os.getenv("RECIPES_SEED_SAMPLES", "1") != "0"


DEFAULT_STORE_CONFIG = StoreConfig()
