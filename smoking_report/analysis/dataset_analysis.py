from typing import Dict, List

import pandas as pd

from smoking_report.analysis.stats.exploratory_stats import ExploratoryAnalysis
from smoking_report.analysis.stats.hypothesis_tests import (
    HypothesisResult,
    region_charges_anova,
    smoker_charges_welch_test,
)
from smoking_report.utils.constants import ALPHA
from smoking_report.utils.logger_config import get_logger


class InsuranceAnalysis:
    """
    Orchestrate every analysis of the insurance dataset
    """

    def __init__(self, data: pd.DataFrame, alpha: float = ALPHA) -> None:

        self.logger = get_logger(self.__class__.__name__, "analysis.log")

        self.alpha = alpha
        self.exploratory = ExploratoryAnalysis(data)

    @property
    def dataset(self) -> pd.DataFrame:
        return self.exploratory.dataset

    def summarize(self) -> Dict[str, object]:
        """Collect every exploratory view in a single mapping"""
        return {
            "charges_stats": self.exploratory.get_charges_stats(),
            "smoker_counts": self.exploratory.get_smoker_counts(),
            "charges_by_smoker": self.exploratory.get_charges_by_smoker(),
            "charges_by_region": self.exploratory.get_charges_by_region(),
            "charges_by_smoker_and_region": (
                self.exploratory.get_charges_by_smoker_and_region()
            ),
            "smoker_share_by_sex": self.exploratory.get_smoker_share_by_sex(),
            "numeric_correlations": self.exploratory.get_numeric_correlations(),
            "smoker_charge_gap": self.exploratory.get_smoker_charge_gap(),
        }

    def run_hypothesis_tests(self) -> List[HypothesisResult]:
        """Welch test on smoking status then ANOVA across regions"""
        results = [
            smoker_charges_welch_test(self.dataset, alpha=self.alpha),
            region_charges_anova(self.dataset, alpha=self.alpha),
        ]

        for res in results:
            self.logger.info(
                f"{res.hypothesis} ({res.test}) : statistic={res.statistic:.3f}, "
                f"p={res.p_value:.3g} -> {res.conclusion}"
            )

        return results
