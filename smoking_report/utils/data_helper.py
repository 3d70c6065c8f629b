import pandas as pd

from smoking_report.utils.constants import (
    CATEGORICAL_COLUMNS,
    INSURANCE_COLUMNS,
    NUMERIC_COLUMNS,
)
from smoking_report.utils.logger_config import get_logger

logger = get_logger("Data helper", "data_helper.log")


def load_insurance_data(source: str) -> pd.DataFrame:
    """Load the insurance records from a local path or URL.

    Column names are normalized, numeric columns coerced and categorical
    columns lower-cased. Rows left incomplete after coercion are dropped.
    """
    logger.info(f"Loading insurance data from {source}")
    df = pd.read_csv(source)

    return clean_insurance_data(df)


def clean_insurance_data(df: pd.DataFrame) -> pd.DataFrame:
    """Normalize a raw insurance DataFrame to the expected schema"""
    df = df.copy()
    df.columns = [str(c).strip().lower() for c in df.columns]

    missing = [c for c in INSURANCE_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Insurance data is missing columns: {missing}")

    df = df[INSURANCE_COLUMNS].copy()

    for col in NUMERIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce")

    for col in CATEGORICAL_COLUMNS:
        df[col] = df[col].astype("string").str.strip().str.lower()

    n_before = len(df)
    df = df.dropna().reset_index(drop=True)
    if len(df) < n_before:
        logger.warning(f"Dropped {n_before - len(df)} incomplete record(s)")

    df["age"] = df["age"].astype(int)
    df["children"] = df["children"].astype(int)
    for col in CATEGORICAL_COLUMNS:
        df[col] = df[col].astype(str)

    logger.info(f"Insurance data loaded ({len(df)} records)")
    return df
