from typing import Optional

import pandas as pd

from smoking_report.scraping.dataset import PrevalenceDataset
from smoking_report.utils.constants import DATASETS_FOLDER, PREVALENCE_CSV
from smoking_report.utils.general_helper import load_file, save_file
from smoking_report.utils.logger_config import get_logger

logger = get_logger("Dataset writer", "data_scraping.log")


def write_prevalence_csv(
    dataset: PrevalenceDataset,
    location: str = DATASETS_FOLDER,
    filename: str = PREVALENCE_CSV,
) -> Optional[str]:
    """Write the dataset to a flat csv file, returns its path.

    Nothing is written for an empty dataset.
    """
    if dataset.is_empty():
        logger.warning("Prevalence dataset is empty, nothing written")
        return None

    path = save_file(dataset.to_frame(), location=location, filename=filename)
    logger.info(f"Wrote {len(dataset)} prevalence rows to {path}")

    return path


def read_prevalence_csv(
    location: str = DATASETS_FOLDER, filename: str = PREVALENCE_CSV
) -> Optional[pd.DataFrame]:
    """Read back a written prevalence file, Percentage kept as text.

    Returns None when the file does not exist.
    """
    return load_file(
        location,
        filename,
        dtype={"Category": str, "Group": str, "Percentage": str, "Population": str},
        keep_default_na=False,
        na_values={"Prevalence": [""]},
    )
