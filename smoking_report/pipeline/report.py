from typing import Dict, List, Optional

import pandas as pd

from smoking_report.analysis.stats.hypothesis_tests import (
    HypothesisResult,
    summarize_results,
)
from smoking_report.scraping.dataset import PrevalenceDataset
from smoking_report.training.regression import RegressionResult
from smoking_report.utils.constants import (
    FEATURE_IMPORTANCE_CSV,
    HYPOTHESIS_SUMMARY_CSV,
    PREVALENCE_SUMMARY_CSV,
    REPORTS_FOLDER,
)
from smoking_report.utils.general_helper import save_file
from smoking_report.utils.logger_config import get_logger

logger = get_logger("report", "report.log")


def prevalence_by_category(dataset: PrevalenceDataset) -> pd.DataFrame:
    """Group count and prevalence range for each scraped category"""
    frame = dataset.to_frame()

    return (
        frame.groupby("Category", sort=False)["Prevalence"]
        .agg(groups="size", min="min", max="max", mean="mean")
        .reset_index()
    )


def render_report(
    summary: Optional[Dict[str, object]] = None,
    hypothesis_results: Optional[List[HypothesisResult]] = None,
    regression: Optional[RegressionResult] = None,
    prevalence: Optional[PrevalenceDataset] = None,
    location: str = REPORTS_FOLDER,
) -> Dict[str, str]:
    """Log every available result and save the tabular ones.

    Missing parts are reported as having no data. Returns the saved paths
    keyed by section.
    """
    saved: Dict[str, str] = {}

    if summary:
        stats = summary["charges_stats"]
        logger.info(
            f"Charges : mean {stats['mean']}, median {stats['median']}, "
            f"std {stats['std']} over {stats['count']} records"
        )
        by_smoker = summary["charges_by_smoker"]
        for smoker, row in by_smoker.iterrows():
            logger.info(f"smoker={smoker} : mean charges {row['mean']:.2f}")
        logger.info(f"Smoker charge gap : {summary['smoker_charge_gap']:.2f}")
    else:
        logger.info("Exploratory summary : no data")

    if hypothesis_results:
        for res in hypothesis_results:
            logger.info(
                f"{res.hypothesis} : p={res.p_value:.3g}, {res.conclusion}"
            )
        saved["hypothesis"] = save_file(
            summarize_results(*hypothesis_results), location, HYPOTHESIS_SUMMARY_CSV
        )
    else:
        logger.info("Hypothesis tests : no data")

    if regression is not None:
        logger.info(
            f"Random forest : RMSE {regression.rmse:.2f}, "
            f"squared correlation {regression.r_squared:.3f}"
        )
        saved["importance"] = save_file(
            regression.importance_frame(), location, FEATURE_IMPORTANCE_CSV
        )
    else:
        logger.info("Regression : no data")

    if prevalence is not None and not prevalence.is_empty():
        by_category = prevalence_by_category(prevalence)
        for _, row in by_category.iterrows():
            logger.info(
                f"{row['Category']} : {row['groups']} groups, prevalence "
                f"{row['min']:.1f}% - {row['max']:.1f}%"
            )
        saved["prevalence"] = save_file(by_category, location, PREVALENCE_SUMMARY_CSV)
    else:
        logger.info("Smoking prevalence : no data")

    return saved
