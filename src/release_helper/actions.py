"""GitHub Actions step outputs."""

from __future__ import annotations

import logging
import os
import uuid
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


def format_output(name: str, value: str) -> str:
    """Render one output entry.

    Multi-line values use the ``name<<DELIMITER`` heredoc form.
    """
    if "\n" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
    body = value.rstrip("\n")
    return f"{name}<<{delimiter}\n{body}\n{delimiter}\n"


def write_outputs(outputs: Mapping[str, str], path: Path | str | None = None) -> Path | None:
    """Append step outputs to the GITHUB_OUTPUT file.

    Args:
        outputs: Output names and values
        path: Target file; defaults to $GITHUB_OUTPUT

    Returns:
        The file written to, or None when running outside Actions
    """
    target = path or os.environ.get("GITHUB_OUTPUT")
    if not target:
        logger.debug("GITHUB_OUTPUT not set, skipping step outputs")
        return None

    output_path = Path(target)
    with output_path.open("a", encoding="utf-8") as f:
        for name, value in outputs.items():
            f.write(format_output(name, value))

    logger.debug("Wrote %d outputs to %s", len(outputs), output_path)
    return output_path
