import json
import os
import secrets
from datetime import datetime, timezone
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

from pydantic import BaseModel


def make_timestamp() -> str:
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
    return f"{timestamp}_{os.getpid()}_{secrets.token_hex(3)}"


def ensure_runs_dir(path: str | Path = "runs") -> None:
    Path(path).mkdir(parents=True, exist_ok=True)


def _as_dict(package: dict[str, Any] | BaseModel) -> dict[str, Any]:
    if isinstance(package, BaseModel):
        return package.model_dump(mode="json", by_alias=True)
    return package


def _atomic_write(path: Path, content: str) -> None:
    with NamedTemporaryFile("w", encoding="utf-8", dir=path.parent, delete=False) as tmp_file:
        tmp_file.write(content)
        tmp_path = Path(tmp_file.name)
    os.replace(tmp_path, path)


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


def save_content_run(
    package: dict[str, Any] | BaseModel,
    raw_outputs: dict[str, str],
    runs_dir: str | Path = "runs",
) -> dict[str, str]:
    ensure_runs_dir(runs_dir)
    ts = make_timestamp()

    content_path = Path(runs_dir) / f"content_{ts}.json"
    raw_path = Path(runs_dir) / f"raw_{ts}.json"

    _atomic_write(content_path, _dumps(_as_dict(package)))
    _atomic_write(raw_path, _dumps(raw_outputs))

    return {
        "content_path": str(content_path),
        "raw_path": str(raw_path),
    }
