"""JSON helpers for answer keys, results and marking scheme files."""
import json
from pathlib import Path


def json_dump(payload: object, indent: int | None = 2) -> str:
    """Serialize object to JSON, pretty-printed unless ``indent`` is None."""
    return json.dumps(payload, ensure_ascii=False, indent=indent)


def json_load(data: str | bytes) -> object:
    """Deserialize JSON, tolerating a leading UTF-8 byte order mark."""
    if isinstance(data, bytes):
        data = data.decode("utf-8-sig")
    return json.loads(data.lstrip("\ufeff"))


def read_json_file(path: Path, default: object) -> object:
    """Read and parse a JSON file, return ``default`` if it does not exist."""
    if not path.exists():
        return default
    return json_load(path.read_bytes())


def write_json_file(path: Path, payload: object) -> None:
    """Write object as a pretty JSON file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json_dump(payload), encoding="utf-8")
