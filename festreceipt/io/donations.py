"""Read donation records dumped from the donations table."""

import logging
from pathlib import Path

import polars as pl
from pydantic import ValidationError

from ..config.model import Donation

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("id", "amount")

STRING_COLUMNS = (
    "id",
    "name",
    "name_english",
    "category",
    "type",
    "donation_mode",
    "payment_method",
)


def read_donations_frame(path: str | Path, sheet: str = "donations") -> pl.DataFrame:
    """Read donations from an Excel workbook or a CSV file."""
    path = Path(path)
    suffix = path.suffix.lower()
    logger.info(f"Reading donations from {path}.")

    try:
        if suffix in (".xlsx", ".xlsm", ".xls"):
            df = pl.read_excel(path, sheet_name=sheet)
        elif suffix == ".csv":
            df = pl.read_csv(path)
        else:
            logger.error(f"Unsupported donations file type: {suffix}")
            raise ValueError(f"Cannot read donations from '{path.name}'.")
    except pl.exceptions.PolarsError as e:
        logger.critical(f"Polars error reading donations file: {e}")
        raise

    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        logger.error(f"Donations file is missing columns: {missing}")
        raise ValueError(f"Donations file is missing the columns: {missing}")

    df = df.with_columns(
        pl.col(column).cast(pl.String)
        for column in STRING_COLUMNS
        if column in df.columns
    ).filter(pl.col("amount").is_not_null())

    logger.info(f"Loaded {df.height} donations.")
    return df


def read_donations(path: str | Path, sheet: str = "donations") -> list[Donation]:
    """Read and validate donation records."""
    donations = []
    errors: list[Exception] = []

    rows = read_donations_frame(path, sheet).iter_rows(named=True)
    for row_number, row in enumerate(rows, start=2):
        try:
            donations.append(Donation.model_validate(row))
        except ValidationError as e:
            logger.critical(f"Invalid donation in row {row_number}: {e}")
            errors.append(e)

    if errors:
        raise ValueError(f"{len(errors)} invalid donation rows in '{path}'.")

    return donations
