# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Quickstart: move rows between a sheet and a pandas DataFrame.

Set SMARTSHEET_ACCESS_TOKEN before running.
"""

import sys
from pathlib import Path

# Add src to PYTHONPATH for local runs
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

import pandas as pd

from smartsheet_client import SmartsheetClient
from smartsheet_client.models.sheet import Column, ColumnType, Sheet


def main() -> None:
    df = pd.DataFrame(
        {
            "Item": ["Laptop", "Monitor", "Dock"],
            "Quantity": [2, 4, None],
        }
    )
    with SmartsheetClient.from_env() as client:
        sheet = client.sheets.create(
            Sheet(
                name="Inventory",
                columns=[
                    Column(title="Item", type=ColumnType.TEXT_NUMBER, primary=True),
                    Column(title="Quantity", type=ColumnType.TEXT_NUMBER),
                ],
            )
        )
        try:
            client.rows.add_dataframe(sheet.id, df)
            print(client.sheets.get_dataframe(sheet.id))
        finally:
            client.sheets.delete(sheet.id)


if __name__ == "__main__":
    main()
