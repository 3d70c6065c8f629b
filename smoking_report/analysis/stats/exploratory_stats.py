from typing import Dict

import pandas as pd

from smoking_report.analysis.base_analysis import BaseAnalysis


class ExploratoryAnalysis(BaseAnalysis):
    """
    Provide descriptive views of charges and smoking status
    """

    def get_charges_stats(self) -> Dict[str, float]:
        """Provide charges distribution stats through the dataset"""
        stats = self.dataset["charges"].describe()
        self.logger.info(f"Average charges : {stats['mean']:.2f}")

        return {
            "count": int(stats["count"]),
            "mean": round(stats["mean"], 2),
            "median": round(stats["50%"], 2),
            "min": round(stats["min"], 2),
            "max": round(stats["max"], 2),
            "std": round(stats["std"], 2),
        }

    def get_smoker_counts(self) -> pd.Series:
        """Provide number of smokers and non smokers"""
        counts = self.dataset["smoker"].value_counts()

        self.logger.info(
            f"Smokers : {counts.get('yes', 0)} | Non smokers : {counts.get('no', 0)}"
        )

        return counts

    def get_charges_by_smoker(self) -> pd.DataFrame:
        """Mean, median and spread of charges per smoking status"""
        return self.dataset.groupby("smoker")["charges"].agg(
            ["count", "mean", "median", "std"]
        )

    def get_charges_by_region(self) -> pd.DataFrame:
        return self.dataset.groupby("region")["charges"].agg(
            ["count", "mean", "median", "std"]
        )

    def get_charges_by_smoker_and_region(self) -> pd.DataFrame:
        """Mean charges with regions as rows and smoking status as columns"""
        return self.dataset.pivot_table(
            index="region", columns="smoker", values="charges", aggfunc="mean"
        )

    def get_smoker_share_by_sex(self) -> pd.Series:
        """Share of smokers within each sex"""
        share = (
            self.dataset.assign(is_smoker=self.dataset["smoker"] == "yes")
            .groupby("sex")["is_smoker"]
            .mean()
        )

        for sex, value in share.items():
            self.logger.info(f"Smoker share for {sex} : {value * 100:.2f}%")

        return share

    def get_numeric_correlations(self) -> pd.DataFrame:
        """Pearson correlations between numeric fields, charges included"""
        return self.dataset[["age", "bmi", "children", "charges"]].corr()

    def get_smoker_charge_gap(self) -> float:
        """Mean charges of smokers minus mean charges of non smokers"""
        gap = self.smokers["charges"].mean() - self.non_smokers["charges"].mean()

        self.logger.info(f"Smokers pay on average {gap:.2f} more than non smokers")

        return float(gap)
