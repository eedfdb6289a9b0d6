"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DESCRIPTION_MAX_CHARS = 50
PAGER_THRESHOLD = 25
DEFAULT_PAGER = "less"
DEFAULT_TIMEOUT = 30.0


@dataclass(slots=True)
class AppConfig:
    description_max_chars: int = DESCRIPTION_MAX_CHARS
    pager_threshold: int = PAGER_THRESHOLD
    default_pager: str = DEFAULT_PAGER
    timeout: float = DEFAULT_TIMEOUT
    no_pager_env_vars: Tuple[str, ...] = ("HELM_LIST_CHARTS_NO_PAGER", "NO_PAGER")
    pager_env_var: str = "PAGER"

    def __post_init__(self) -> None:
        if self.description_max_chars < 1:
            raise ValueError("description_max_chars must be positive")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
