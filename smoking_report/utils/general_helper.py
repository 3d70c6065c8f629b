import os
from typing import Optional

import pandas as pd

from smoking_report.utils.logger_config import get_logger

logger = get_logger("Helper", "general_helper.log")


def find_file(filename, search_path):

    if os.path.isfile(os.path.join(search_path, filename)):
        logger.info(f"Found file {filename}!")
        return True

    logger.info("Didn't find any matching file.")
    return False


def save_file(
    data: pd.DataFrame,
    location: str,
    filename: str,
) -> str:
    """Save a DataFrame under `location`, format picked from the extension"""

    os.makedirs(location, exist_ok=True)
    format = filename.rsplit(".", 1)[-1]
    full_loc = os.path.join(location, filename)

    try:
        match (format):
            case "csv":
                data.to_csv(full_loc, index=False)
            case "json":
                data.to_json(full_loc, orient="records", indent=2)
            case _:
                raise ValueError(f"Format not supported : {format}")
    except (OSError, ValueError) as e:
        logger.error(f"An error occurred when saving {filename} : {e}")
        raise

    logger.info(f"Successfully saved file {full_loc}")
    return full_loc


def load_file(
    location: str, filename: str, **read_kwargs
) -> Optional[pd.DataFrame]:
    """Load a csv or json file, None when missing.

    `read_kwargs` are passed to the pandas reader.
    """

    if not find_file(filename, location):
        return None
    format = filename.rsplit(".", 1)[-1]
    full_loc = os.path.join(location, filename)

    match (format):
        case "csv":
            data = pd.read_csv(full_loc, **read_kwargs)
        case "json":
            data = pd.read_json(full_loc, **read_kwargs)
        case _:
            logger.info(f"Unable to load file {filename}, returning None.")
            logger.info(f"Format not supported : {format}.")
            return None

    logger.info(f"Successfully loaded file {filename}")
    return data
