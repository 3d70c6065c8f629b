from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
import pandas as pd
from sklearn.ensemble import RandomForestRegressor
from sklearn.metrics import mean_squared_error
from sklearn.model_selection import train_test_split

from smoking_report.utils.constants import (
    N_ESTIMATORS,
    RANDOM_SEED,
    TARGET_COLUMN,
    TEST_SIZE,
)
from smoking_report.utils.logger_config import get_logger

logger = get_logger("Regression", "training.log")

FEATURE_COLUMNS = ["age", "sex", "bmi", "children", "smoker", "region"]
REGIONS = ["northeast", "northwest", "southeast", "southwest"]


@dataclass
class RegressionResult:
    """Trained forest and its held-out evaluation

    Attributes:
        model: fitted RandomForestRegressor
        feature_names: encoded columns the model was trained on
        rmse: root mean squared error on the test split
        r_squared: squared Pearson correlation between predictions and actuals
        importances: (field, importance) pairs, most important first
    """

    model: RandomForestRegressor
    feature_names: List[str]
    rmse: float
    r_squared: float
    importances: List[Tuple[str, float]]
    n_train: int
    n_test: int

    def importance_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.importances, columns=["feature", "importance"])


def encode_features(df: pd.DataFrame) -> pd.DataFrame:
    """Binary encode sex/smoker and one-hot encode region"""
    X = df[FEATURE_COLUMNS].copy()

    X["sex"] = (X["sex"] == "male").astype(int)
    X["smoker"] = (X["smoker"] == "yes").astype(int)

    X["region"] = pd.Categorical(X["region"], categories=REGIONS)
    X = pd.get_dummies(X, columns=["region"], prefix="region", dtype=int)

    return X


def _source_feature(column: str) -> str:
    return column.split("_", 1)[0] if column.startswith("region_") else column


def aggregate_importances(
    feature_names: List[str], importances: np.ndarray
) -> List[Tuple[str, float]]:
    """Sum dummy column importances back onto their source field"""
    totals = (
        pd.Series(importances, index=feature_names)
        .groupby(_source_feature)
        .sum()
        .sort_values(ascending=False)
    )

    return [(str(name), float(value)) for name, value in totals.items()]


def train_charges_regressor(
    df: pd.DataFrame,
    n_estimators: int = N_ESTIMATORS,
    test_size: float = TEST_SIZE,
    random_state: int = RANDOM_SEED,
) -> RegressionResult:
    """Fit a random forest predicting charges and evaluate it on a held-out split"""
    X = encode_features(df)
    y = df[TARGET_COLUMN].astype(float)

    X_train, X_test, y_train, y_test = train_test_split(
        X, y, test_size=test_size, random_state=random_state
    )

    logger.info(
        f"Training random forest ({n_estimators} trees) on {len(X_train)} records, "
        f"{len(X_test)} held out"
    )

    model = RandomForestRegressor(n_estimators=n_estimators, random_state=random_state)
    model.fit(X_train, y_train)

    preds = model.predict(X_test)
    rmse = float(np.sqrt(mean_squared_error(y_test, preds)))
    r_squared = float(np.corrcoef(preds, y_test.to_numpy())[0, 1] ** 2)

    importances = aggregate_importances(list(X.columns), model.feature_importances_)

    logger.info(f"Test RMSE : {rmse:.2f} | squared correlation : {r_squared:.3f}")
    for name, value in importances:
        logger.info(f"Importance of {name} : {value:.3f}")

    return RegressionResult(
        model=model,
        feature_names=list(X.columns),
        rmse=rmse,
        r_squared=r_squared,
        importances=importances,
        n_train=len(X_train),
        n_test=len(X_test),
    )
