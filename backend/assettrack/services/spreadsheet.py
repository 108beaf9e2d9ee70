import io
import logging
from datetime import date, datetime

import pandas as pd

from ..core.errors import ParseError

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = (".xlsx", ".xlsm")
CSV_SUFFIXES = (".csv",)


def _cell_text(value):
    if value is None:
        return None
    if not isinstance(value, str) and pd.isna(value):
        return None
    if isinstance(value, (pd.Timestamp, datetime)):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    text = str(value).strip()
    return text or None


def _frame_to_rows(df: pd.DataFrame) -> list[dict]:
    df = df.dropna(how="all")
    rows = []
    for record in df.to_dict(orient="records"):
        row = {}
        for key, value in record.items():
            text = _cell_text(value)
            if text is not None:
                row[str(key)] = text
        if row:
            rows.append(row)
    return rows


def read_rows(filename: str, content: bytes) -> list[dict]:
    """Parse the first sheet of an uploaded file into header-keyed rows.

    Any failure aborts the import before a single row is processed.
    """
    name = (filename or "").lower()
    if not content:
        raise ParseError("The uploaded file is empty.")
    try:
        if name.endswith(EXCEL_SUFFIXES):
            df = pd.read_excel(io.BytesIO(content), sheet_name=0, engine="openpyxl")
        elif name.endswith(CSV_SUFFIXES):
            df = pd.read_csv(io.BytesIO(content), dtype=str, keep_default_na=False)
        else:
            raise ParseError("Please upload an Excel file (.xlsx) or a CSV file.")
    except ParseError:
        raise
    except Exception as exc:
        logger.warning("could not parse upload %s: %s", filename, exc)
        raise ParseError("Failed to process Excel file. Please ensure the file is in the correct format.") from exc
    rows = _frame_to_rows(df)
    logger.info("parsed %s data rows from %s", len(rows), filename)
    return rows
