# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal pandas helpers"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Sequence

import pandas as pd

from ..core._error_codes import VALIDATION_UNSUPPORTED_TYPE
from ..core.errors import ValidationError
from ..models.row import Cell, Row
from ..models.sheet import Column, Sheet


def sheet_to_dataframe(sheet: Sheet) -> pd.DataFrame:
    """Convert a fetched sheet to a DataFrame.

    One DataFrame column per sheet column (titled, in sheet order) and one DataFrame row per
    sheet row, indexed by row id. Empty cells become ``None``.
    """
    columns = sorted(sheet.columns, key=lambda c: c.index if c.index is not None else 0)
    titles = [c.title for c in columns]
    records = []
    for row in sheet.rows:
        by_id = {cell.column_id: cell.value for cell in row.cells}
        records.append([by_id.get(c.id) for c in columns])
    index = pd.Index([row.id for row in sheet.rows], name="row_id")
    return pd.DataFrame(records, columns=titles, index=index)


def dataframe_to_rows(df: pd.DataFrame, columns: Sequence[Column], na_as_null: bool = False) -> List[Row]:
    """Convert DataFrame rows to new :class:`Row` objects, matching DataFrame columns to sheet column titles.

    :param df: Input DataFrame.
    :param columns: Columns of the target sheet.
    :param na_as_null: When False (default), missing values are omitted from each row.
        When True, missing values are sent as empty cells.
    :raises ValidationError: If a DataFrame column has no sheet column with the same title.
    """
    if not isinstance(df, pd.DataFrame):
        raise ValidationError("df must be a pandas DataFrame", subcode=VALIDATION_UNSUPPORTED_TYPE)
    by_title: Dict[str, Column] = {c.title: c for c in columns if c.title is not None}
    missing = [name for name in df.columns if name not in by_title]
    if missing:
        raise ValidationError(
            f"DataFrame columns not found in sheet: {', '.join(map(str, missing))}",
            details={"missing_columns": missing},
        )
    rows = []
    for record in df.to_dict(orient="records"):
        cells = []
        for title, value in record.items():
            if isinstance(value, (list, dict)) or pd.notna(value):
                cells.append(Cell(column_id=by_title[title].id, value=_to_cell_value(value)))
            elif na_as_null:
                cells.append(Cell(column_id=by_title[title].id, value=None))
        rows.append(Row(cells=cells, to_bottom=True))
    return rows


def _to_cell_value(value: Any) -> Any:
    # Covers pd.Timestamp, datetime and date
    if isinstance(value, date):
        return value.isoformat()
    # numpy scalars are not JSON serializable
    if hasattr(value, "item") and not isinstance(value, (str, bytes)):
        return value.item()
    return value
