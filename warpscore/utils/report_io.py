"""
JSON input loading and report output for scoreboard runs.

Input is the upstream account score table; output is the serialized
scoreboard report, written atomically so a failed run leaves nothing behind.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Union
import bittensor as bt

from warpscore.utils.date_utils import get_date_string
from warpscore.utils.error_handling import log_and_raise_input_error


def load_account_scores(file_path: Union[str, Path]) -> Dict[str, Dict[str, Any]]:
    """
    Load the raw account score table from a JSON file.

    Args:
        file_path: Path to a JSON object mapping account -> {"weightedScore": ...}

    Returns:
        Parsed mapping, in file order

    Raises:
        InputError: If the file is missing, unreadable, not JSON, or not an object
    """
    file_path = Path(file_path)
    bt.logging.info(f"Loading data from {file_path}")

    try:
        with open(file_path, 'r') as f:
            data = json.load(f)
    except OSError as e:
        log_and_raise_input_error(e, str(file_path), context=f"Failed to load {file_path}")
    except json.JSONDecodeError as e:
        log_and_raise_input_error(e, str(file_path), context=f"Invalid JSON in {file_path}")

    if not isinstance(data, dict):
        log_and_raise_input_error(
            ValueError(f"expected a JSON object, got {type(data).__name__}"),
            str(file_path),
            context=f"Invalid account scores in {file_path}"
        )

    bt.logging.info(f"Loaded {len(data)} account scores from {file_path}")
    return data


def output_file(
    label: str,
    contents: str,
    output_dir: Union[str, Path],
    date_string: Optional[str] = None
) -> Path:
    """
    Write report contents to '<output_dir>/<label>-<date>.json'.

    Contents go to a temporary file in the target directory first and are
    then renamed into place.

    Args:
        label: Fixed report label (e.g. 'teamScores')
        contents: Serialized report
        output_dir: Directory to write into (created if missing)
        date_string: Date part of the filename (default: today, UTC)

    Returns:
        Path to the written artifact
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    filepath = output_dir / f"{label}-{date_string or get_date_string()}.json"

    fd, tmp_path = tempfile.mkstemp(dir=output_dir, prefix=f".{label}-", suffix=".tmp")
    try:
        with os.fdopen(fd, 'w') as f:
            f.write(contents)
        os.replace(tmp_path, filepath)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

    bt.logging.info(f"✅ Wrote {label} report -> {filepath}")
    return filepath
