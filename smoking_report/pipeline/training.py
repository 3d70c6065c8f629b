from typing import Optional

import pandas as pd

from smoking_report.training.regression import RegressionResult, train_charges_regressor
from smoking_report.utils.constants import N_ESTIMATORS, RANDOM_SEED, TEST_SIZE
from smoking_report.utils.logger_config import get_logger

logger = get_logger("training", "training.log")


def run_training(
    df: pd.DataFrame,
    n_estimators: int = N_ESTIMATORS,
    test_size: float = TEST_SIZE,
    random_state: int = RANDOM_SEED,
) -> Optional[RegressionResult]:
    """Train the charges regressor, returns None when there is nothing to train on"""
    if df.empty:
        logger.warning("Empty insurance dataset, training skipped")
        return None

    return train_charges_regressor(
        df, n_estimators=n_estimators, test_size=test_size, random_state=random_state
    )
