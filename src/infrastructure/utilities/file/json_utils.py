"""JSON file helpers for small state files."""

import json
import os
import tempfile
from typing import Any, Dict


def read_json_file(file_path: str, encoding: str = "utf-8") -> Any:
    """
    Read and parse a JSON file.

    Raises:
        OSError: If the file cannot be opened
        json.JSONDecodeError: If the content is not valid JSON
    """
    with open(file_path, "r", encoding=encoding) as f:
        return json.load(f)


def write_json_file(
    file_path: str,
    data: Dict[str, Any],
    encoding: str = "utf-8",
    indent: int = 2,
) -> None:
    """
    Write ``data`` as JSON, replacing ``file_path`` atomically.

    The content goes to a temporary file in the same directory which is then
    renamed over the target, so readers never see a half-written file.
    Parent directories are created as needed.

    Raises:
        OSError: If the file cannot be written
        TypeError: If data cannot be serialized to JSON
    """
    directory = os.path.dirname(os.path.abspath(file_path))
    os.makedirs(directory, exist_ok=True)

    content = json.dumps(data, indent=indent, sort_keys=True)

    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp-", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            f.write(content)
            f.write("\n")
        os.replace(tmp_path, file_path)
    except OSError:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
