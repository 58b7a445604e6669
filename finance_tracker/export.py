"""CSV export of report records.

Records are flattened into a DataFrame with one row per record and written
with pandas, which takes care of quoting descriptions that contain commas
or quotes.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd

from . import config
from .exceptions import EmptyExportError
from .models import Record
from .search import plain_amount

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = ['Date', 'Description', 'Amount', 'Kind', 'Category']


def records_to_frame(records: Iterable[Record]) -> pd.DataFrame:
    """Flatten records into a DataFrame with the export columns."""
    rows = [
        {
            'Date': record.date.isoformat(),
            'Description': record.description or '',
            'Amount': plain_amount(record.amount),
            'Kind': record.kind.value,
            'Category': record.category_name or config.UNCATEGORIZED_LABEL,
        }
        for record in records
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def default_export_name(today: Optional[date] = None) -> str:
    return f"report-{(today or date.today()).isoformat()}.csv"


def export_csv(
    records: Iterable[Record],
    path: Optional[Union[str, Path]] = None,
) -> Union[str, Path]:
    """Export records to CSV.

    Args:
        records: Records to export, in the order they should appear
        path: Destination file. When omitted the CSV text is returned instead.
            A directory path receives a file named by :func:`default_export_name`.

    Returns:
        The CSV text, or the path written to

    Raises:
        EmptyExportError: If there are no records to export
    """
    frame = records_to_frame(records)
    if frame.empty:
        raise EmptyExportError("No records to export; adjust the filters or add transactions.")

    if path is None:
        return frame.to_csv(index=False)

    target = Path(path)
    if target.is_dir():
        target = target / default_export_name()
    target.parent.mkdir(parents=True, exist_ok=True)
    # utf-8-sig writes a BOM so spreadsheet apps detect the encoding
    frame.to_csv(target, index=False, encoding='utf-8-sig')
    logger.info("Exported %d records to %s", len(frame), target)
    return target
