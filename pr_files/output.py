"""Flat-file output for file lists."""

import os
import logging
from typing import List


def output_path(output_dir: str, prefix, suffix: str) -> str:
    """Build the path of an output file, e.g. `<dir>/42_chg.txt`.

    Args:
        output_dir: Directory the file lives in
        prefix: PR number, or `all` for aggregate files
        suffix: Output suffix (`all`, `chg`, `del`)

    Returns:
        Path of the output file
    """
    return os.path.join(output_dir, f"{prefix}_{suffix}.txt")


def write_file_list(file_path: str, filenames: List[str]):
    """Write one filename per line, without a trailing newline.

    Raises:
        OSError: If the file cannot be written
    """
    data = '\n'.join(filenames)
    with open(file_path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(data)
    logging.debug(f"Wrote {len(filenames)} entries to {file_path}")


def ensure_output_dir(path: str):
    """Create the output directory (and parents) if it does not exist."""
    os.makedirs(path, exist_ok=True)
