"""Write z-tables to CSV, JSON and HTML files.

This module is the output boundary between the in-memory table and
flat-file artifacts. Row order on disk always matches table order.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, List

import pandas as pd

from .schema import COLUMNS
from .ztable import DEFAULT_CONFIG, ZTable, z_table_to_frame

logger = logging.getLogger(__name__)

JSON_ORIENTS = ("object", "pairs")
EXPORT_FORMATS = ("csv", "json", "html")


def _ensure_parent(file_path: str) -> None:
    parent = os.path.dirname(os.path.abspath(file_path))
    os.makedirs(parent, exist_ok=True)


def export_z_table_to_csv(table: ZTable, file_path: str) -> str:
    """Write the table as CSV with header ``Z,Cumulative Probability``.

    Args:
        table (list[ZTableEntry]): Output from ``generate_z_table``.
        file_path (str): Destination path; parent directories are created.

    Returns:
        str: ``file_path``.
    """
    _ensure_parent(file_path)
    z_table_to_frame(table).to_csv(file_path, index=False)
    logger.info("Saved z-table CSV to %s", file_path)
    return file_path


def export_z_table_to_json(
    table: ZTable,
    file_path: str,
    orient: str = "object",
    z_decimals: int = DEFAULT_CONFIG.z_decimals,
) -> str:
    """Write the table as pretty-printed JSON.

    Args:
        table (list[ZTableEntry]): Output from ``generate_z_table``.
        file_path (str): Destination path; parent directories are created.
        orient (str, optional): ``"object"`` writes one member per entry,
            keyed by z formatted with ``z_decimals`` decimals. ``"pairs"``
            writes a list of ``{"Z": ..., "Cumulative Probability": ...}``
            records. Defaults to ``"object"``.
        z_decimals (int, optional): Key formatting precision for the
            ``"object"`` orient.

    Returns:
        str: ``file_path``.

    Raises:
        ValueError: If ``orient`` is not supported.
    """
    if orient not in JSON_ORIENTS:
        raise ValueError(f"orient must be one of {JSON_ORIENTS}, got {orient!r}")

    _ensure_parent(file_path)
    if orient == "object":
        series = pd.Series(
            [entry.probability for entry in table],
            index=[f"{entry.z:.{z_decimals}f}" for entry in table],
            dtype=float,
        )
        series.to_json(file_path, orient="index", indent=2)
    else:
        z_table_to_frame(table).to_json(file_path, orient="records", indent=2)

    logger.info("Saved z-table JSON (%s) to %s", orient, file_path)
    return file_path


def format_z_table_as_html(
    table: ZTable,
    z_decimals: int = DEFAULT_CONFIG.z_decimals,
    probability_decimals: int = DEFAULT_CONFIG.probability_decimals,
) -> str:
    """Render the table as an HTML ``<table>`` with a bordered grid."""
    frame = z_table_to_frame(table)
    return frame.to_html(
        index=False,
        border=1,
        formatters={
            COLUMNS.z: lambda v: f"{v:.{z_decimals}f}",
            COLUMNS.probability: lambda v: f"{v:.{probability_decimals}f}",
        },
    )


def export_z_table_to_html(table: ZTable, file_path: str) -> str:
    """Write :func:`format_z_table_as_html` output to ``file_path``."""
    _ensure_parent(file_path)
    with open(file_path, "w", encoding="utf-8") as fh:
        fh.write(format_z_table_as_html(table))
    logger.info("Saved z-table HTML to %s", file_path)
    return file_path


def save_z_table(
    table: ZTable,
    output_dir: str = "output",
    formats: Iterable[str] = ("csv", "json"),
) -> List[str]:
    """Export the table to ``output_dir/z_table.<fmt>`` for each format.

    Args:
        table (list[ZTableEntry]): Output from ``generate_z_table``.
        output_dir (str): Directory where files are written.
        formats (Iterable[str]): Any of ``"csv"``, ``"json"``, ``"html"``.

    Returns:
        list[str]: Written paths, in the order of ``formats``.

    Raises:
        ValueError: If a format is not supported. Nothing is written in that
            case.
    """
    formats = list(formats)
    unknown = [fmt for fmt in formats if fmt not in EXPORT_FORMATS]
    if unknown:
        raise ValueError(f"Unsupported export format(s): {unknown}")

    os.makedirs(output_dir, exist_ok=True)
    writers = {
        "csv": export_z_table_to_csv,
        "json": export_z_table_to_json,
        "html": export_z_table_to_html,
    }
    paths = []
    for fmt in formats:
        path = os.path.join(output_dir, f"z_table.{fmt}")
        paths.append(writers[fmt](table, path))
    return paths
