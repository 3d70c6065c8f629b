import pandas as pd

from smoking_report.utils.data_helper import clean_insurance_data
from smoking_report.utils.logger_config import get_logger


class BaseAnalysis:
    """
    Basic class holding the insurance dataset every analysis works on

    Args :
        data -> insurance records (age, sex, bmi, children, smoker, region, charges)
    """

    def __init__(self, data: pd.DataFrame) -> None:

        self.logger = get_logger(self.__class__.__name__, "analysis.log")

        self.dataset = clean_insurance_data(data)

        self.num_records = len(self.dataset)

        self.logger.info(f"Dataset successfully loaded ({self.num_records} records)")

    @property
    def smokers(self) -> pd.DataFrame:
        return self.dataset[self.dataset["smoker"] == "yes"]

    @property
    def non_smokers(self) -> pd.DataFrame:
        return self.dataset[self.dataset["smoker"] == "no"]
