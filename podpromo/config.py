import os
from pathlib import Path

from pydantic import BaseModel

from .llm import DEFAULT_MODEL


class AppConfig(BaseModel, frozen=True):
    api_key: str = ""
    model: str = DEFAULT_MODEL
    runs_dir: Path = Path("runs")


def load_config() -> AppConfig:
    return AppConfig(
        api_key=os.getenv("ANTHROPIC_API_KEY", ""),
        model=os.getenv("PODPROMO_MODEL") or DEFAULT_MODEL,
        runs_dir=Path(os.getenv("PODPROMO_RUNS_DIR") or "runs"),
    )
