"""Utility modules."""
from api.utils.file_utils import read_upload_limited
from api.utils.json_utils import (
    json_dump,
    json_load,
    read_json_file,
    write_json_file,
)
from api.utils.time_utils import format_time, utc_now
from api.utils.validation import validate_id

__all__ = [
    "read_upload_limited",
    "json_dump",
    "json_load",
    "read_json_file",
    "write_json_file",
    "format_time",
    "utc_now",
    "validate_id",
]
