"""Writes generated briefs to local JSON files."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

from config import settings


def write_briefs_to_file(
    briefs: Any,
    output_dir: Optional[Union[str, Path]] = None,
    timestamp: Optional[datetime] = None,
) -> Path:
    """Serialize briefs to ``<output_dir>/briefs_<YYYYmmdd_HHMMSS>.json``.

    Args:
        briefs: The JSON payload as generated (array or single object)
        output_dir: Target directory, created if missing. Defaults to settings.output_dir.
        timestamp: Time used in the file name (defaults to now)

    Returns:
        Path of the written file
    """
    out_dir = Path(output_dir) if output_dir else settings.get_output_path()
    out_dir.mkdir(parents=True, exist_ok=True)

    stamp = (timestamp or datetime.now()).strftime("%Y%m%d_%H%M%S")
    path = out_dir / f"briefs_{stamp}.json"
    path.write_text(json.dumps(briefs, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def load_briefs_file(path: Union[str, Path]) -> Any:
    """Read a briefs JSON file back.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    return json.loads(Path(path).read_text(encoding="utf-8"))
