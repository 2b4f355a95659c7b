# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Quickstart: groups, sheets, rows and search.

Set SMARTSHEET_ACCESS_TOKEN before running. Group creation needs a system
administrator token; without one the group steps are skipped.
"""

import sys
from pathlib import Path

# Add src to PYTHONPATH for local runs
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from smartsheet_client import SmartsheetClient
from smartsheet_client.core.errors import AuthorizationError, HttpError
from smartsheet_client.models.group import Group, GroupMember
from smartsheet_client.models.pagination import PaginationParameters
from smartsheet_client.models.row import Cell, Row
from smartsheet_client.models.sheet import Column, ColumnType, Sheet


def main() -> None:
    with SmartsheetClient.from_env() as client:
        try:
            group = client.groups.create(
                Group(
                    name="Test Group",
                    description="Test group",
                    members=[GroupMember(email="jane.doe@example.com")],
                )
            )
            print({"created_group": group.id})
        except AuthorizationError as ex:
            print(f"Skipping group creation: {ex.message}")

        groups = client.groups.list(PaginationParameters(include_all=True))
        print({"groups": len(groups), "total": groups.total_count})
        if groups:
            print({"first_group": client.groups.get(groups[0].id).name})

        sheet = client.sheets.create(
            Sheet(
                name="Quickstart Sheet",
                columns=[
                    Column(title="Task", type=ColumnType.TEXT_NUMBER, primary=True),
                    Column(title="Done", type=ColumnType.CHECKBOX),
                ],
            )
        )
        task_col = sheet.get_column_by_title("Task")
        done_col = sheet.get_column_by_title("Done")
        print({"created_sheet": sheet.id})

        try:
            added = client.rows.add(
                sheet.id,
                [
                    Row(to_bottom=True, cells=[Cell(column_id=task_col.id, value="test row 1")]),
                    Row(to_bottom=True, cells=[Cell(column_id=task_col.id, value="test row 2")]),
                ],
            )
            client.rows.update(sheet.id, Row(id=added[0].id, cells=[Cell(column_id=done_col.id, value=True)]))
            print({"rows": [r.id for r in client.rows.list(sheet.id)]})

            hits = client.search.search_sheet(sheet.id, "test")
            print({"search_hits": hits.total_count})
        finally:
            client.sheets.delete(sheet.id)

        try:
            client.sheets.get(sheet.id)
        except HttpError as ex:
            print({"after_delete": ex.subcode})


if __name__ == "__main__":
    main()
