from typing import Dict, List, Tuple

import pandas as pd

from smoking_report.analysis.dataset_analysis import InsuranceAnalysis
from smoking_report.analysis.stats.hypothesis_tests import HypothesisResult
from smoking_report.utils.constants import ALPHA
from smoking_report.utils.logger_config import get_logger

logger = get_logger("analysis", "analysis.log")


def run_analysis(
    df: pd.DataFrame, alpha: float = ALPHA, no_analysis: bool = False
) -> Tuple[Dict[str, object], List[HypothesisResult]]:
    """Run exploratory summaries and hypothesis tests on the insurance data"""
    if no_analysis:
        logger.info("Skipping analysis as per --no-analysis flag")
        return {}, []

    analysis = InsuranceAnalysis(df, alpha=alpha)

    logger.info("Exploratory analysis on the insurance dataset")
    summary = analysis.summarize()

    if summary["smoker_charge_gap"] <= 0:
        logger.warning("Smokers do not pay more than non smokers in this dataset")

    logger.info("Hypothesis tests on charges")
    results = analysis.run_hypothesis_tests()

    logger.info("Analysis ended")
    return summary, results
