"""Excel standings export."""

import logging
from pathlib import Path

import openpyxl
from openpyxl.styles import Font

from .constants import EXPORT_COLUMNS
from .models import QualificationRow

logger = logging.getLogger('leaguetable.excel_export')


def export_standings_to_excel(
    excel_path: str | Path,
    rows: list[QualificationRow],
    sheet_name: str = 'Standings',
) -> None:
    """
    Write qualification standings to a worksheet.

    Row 1 holds the column headers; each team follows in standings order.
    Teams in a qualifying spot are written in bold. If the workbook already
    exists, only the named sheet is replaced.

    Args:
        excel_path: Path to the .xlsx file (created if missing)
        rows: Output of compute_qualification
        sheet_name: Sheet to (re)write
    """
    excel_path = Path(excel_path)

    if excel_path.exists():
        wb = openpyxl.load_workbook(excel_path)
        if sheet_name in wb.sheetnames:
            del wb[sheet_name]
        ws = wb.create_sheet(sheet_name)
    else:
        excel_path.parent.mkdir(parents=True, exist_ok=True)
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = sheet_name

    for col, (header, _attr) in enumerate(EXPORT_COLUMNS, 1):
        ws.cell(row=1, column=col, value=header).font = Font(bold=True)

    for row_num, row in enumerate(rows, 2):
        for col, (_header, attr) in enumerate(EXPORT_COLUMNS, 1):
            value = getattr(row, attr)
            if attr == 'status':
                value = row.status.value
            cell = ws.cell(row=row_num, column=col, value=value)
            if row.qualifies:
                cell.font = Font(bold=True)

    wb.save(excel_path)
    wb.close()
    logger.info(f'Standings saved to {excel_path}')
