import csv
import io
import logging
from pathlib import PurePath
from typing import Any
from xml.etree.ElementTree import ParseError
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

logger = logging.getLogger(__name__)

WORKBOOK_EXTENSIONS = {".xlsx", ".xlsm"}
TEXT_EXTENSIONS = {".csv"}
ACCEPTED_EXTENSIONS = WORKBOOK_EXTENSIONS | TEXT_EXTENSIONS

_ZIP_MAGIC = b"PK\x03\x04"
_OLE_MAGIC = b"\xd0\xcf\x11\xe0"

Row = list[Any]

WORKBOOK_ERROR = "Could not read the workbook. Check that it is a valid .xlsx file."
CSV_ERROR = "Could not read the CSV file. Check that it is valid comma-separated text."


class SpreadsheetDecodeError(ValueError):
    pass


def _trim_row(values: Any) -> Row:
    row = list(values)
    while row and (row[-1] is None or row[-1] == ""):
        row.pop()
    return row


def _detect_kind(data: bytes, filename: str | None) -> str:
    suffix = PurePath(filename or "").suffix.lower()
    if suffix in WORKBOOK_EXTENSIONS:
        return "workbook"
    if suffix in TEXT_EXTENSIONS:
        return "csv"
    if suffix == ".xls" or data.startswith(_OLE_MAGIC):
        raise SpreadsheetDecodeError("Legacy .xls files are not supported. Save the sheet as .xlsx or .csv and upload it again.")
    if data.startswith(_ZIP_MAGIC):
        return "workbook"
    raise SpreadsheetDecodeError(f"Unsupported file type {suffix or '(none)'}. Upload an .xlsx or .csv file.")


def _read_workbook(data: bytes) -> list[Row]:
    try:
        workbook = load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, KeyError, OSError, ValueError) as exc:
        raise SpreadsheetDecodeError(WORKBOOK_ERROR) from exc
    try:
        if not workbook.worksheets:
            raise SpreadsheetDecodeError("The workbook has no worksheets.")
        sheet = workbook.worksheets[0]
        # Read-only sheets parse their XML lazily, while rows are iterated.
        # lxml parse errors also derive from SyntaxError.
        try:
            return [_trim_row(values) for values in sheet.iter_rows(values_only=True)]
        except (ParseError, SyntaxError, BadZipFile, KeyError, OSError, ValueError) as exc:
            raise SpreadsheetDecodeError(WORKBOOK_ERROR) from exc
    finally:
        workbook.close()


def _read_csv(data: bytes) -> list[Row]:
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise SpreadsheetDecodeError("The CSV file is not valid UTF-8 text.") from exc
    try:
        reader = csv.reader(io.StringIO(text, newline=""))
        return [_trim_row(cell if cell != "" else None for cell in values) for values in reader]
    except csv.Error as exc:
        raise SpreadsheetDecodeError(CSV_ERROR) from exc


def decode_spreadsheet(data: bytes, filename: str | None = None) -> list[Row]:
    """Decode an uploaded spreadsheet into rows of raw cell values.

    Only the first worksheet of a workbook is read. Trailing empty cells are
    dropped from every row, so blank lines come back as empty rows.
    """
    if not data:
        raise SpreadsheetDecodeError("The uploaded file is empty.")
    kind = _detect_kind(data, filename)
    rows = _read_workbook(data) if kind == "workbook" else _read_csv(data)
    logger.debug("Decoded %d rows from %s", len(rows), filename or "upload")
    return rows
