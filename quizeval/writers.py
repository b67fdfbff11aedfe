"""Persist report frames as whole CSV (and optional XLSX) files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import List

import pandas as pd
from openpyxl.utils.exceptions import IllegalCharacterError

from quizeval.config import OUTPUT_ENCODING
from quizeval.errors import WriteError

logger = logging.getLogger(__name__)


def _stage(frame: pd.DataFrame, staged: Path, sheet_name: str) -> None:
    if staged.suffix == ".xlsx":
        with pd.ExcelWriter(staged, engine="openpyxl") as writer:
            frame.to_excel(writer, sheet_name=sheet_name[:31], index=False)
    else:
        frame.to_csv(staged, index=False, encoding=OUTPUT_ENCODING)


def write_report(frame: pd.DataFrame, path: Path, *, xlsx: bool = False) -> List[Path]:
    """Write ``frame`` to ``path`` and, with ``xlsx``, to a workbook next to it.

    Every file is staged in a scratch directory beside ``path`` and only moved
    into place once all of them were written, so a failure leaves every
    destination as it was.
    """
    path = Path(path)
    targets = [path]
    if xlsx:
        targets.append(path.with_suffix(".xlsx"))
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with TemporaryDirectory(prefix=".quizeval_", dir=path.parent) as tmp_dir:
            staged = [Path(tmp_dir) / target.name for target in targets]
            for staged_path in staged:
                _stage(frame, staged_path, path.stem)
            for staged_path, target in zip(staged, targets):
                os.replace(staged_path, target)
    except (OSError, ValueError, IllegalCharacterError) as exc:
        raise WriteError(f"Failed to write '{path}': {exc}") from exc
    for target in targets:
        logger.info("Wrote %d row(s) to %s", len(frame), target)
    return targets
