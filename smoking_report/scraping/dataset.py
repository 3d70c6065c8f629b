import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

import pandas as pd

from smoking_report.scraping.categories import Category
from smoking_report.utils.constants import POPULATION_PLACEHOLDER, PREVALENCE_COLUMNS


@dataclass(frozen=True)
class PrevalenceRow:
    """One group line of a scraped prevalence table.

    Attributes:
        category: Grouping the source table was classified as
        group: Label of the population group, e.g. "18–24"
        percentage_text: Cell text as published, e.g. "18.7%"
        prevalence: Parsed percentage, NaN when the text is not a number
    """

    category: Category
    group: str
    percentage_text: str
    prevalence: float

    @property
    def has_prevalence(self) -> bool:
        return math.isfinite(self.prevalence)

    def to_record(self) -> dict:
        return {
            "Category": self.category.label,
            "Group": self.group,
            "Percentage": self.percentage_text,
            "Population": POPULATION_PLACEHOLDER,
            "Prevalence": self.prevalence,
        }


class PrevalenceDataset:
    """
    Ordered, append-only collection of prevalence rows built across tables.

    Rows coming from different tables are never merged or deduplicated,
    a category can therefore appear in several runs of rows.
    """

    def __init__(self, rows: Iterable[PrevalenceRow] = ()) -> None:
        self._rows: List[PrevalenceRow] = list(rows)

    def append(self, row: PrevalenceRow) -> None:
        self._rows.append(row)

    def extend(self, rows: Iterable[PrevalenceRow]) -> None:
        self._rows.extend(rows)

    @property
    def rows(self) -> Tuple[PrevalenceRow, ...]:
        return tuple(self._rows)

    def is_empty(self) -> bool:
        return not self._rows

    def categories(self) -> List[Category]:
        """Categories present in the dataset, in order of first appearance"""
        seen: List[Category] = []
        for row in self._rows:
            if row.category not in seen:
                seen.append(row.category)
        return seen

    def to_frame(self) -> pd.DataFrame:
        """Final tabular form with the fixed output column order"""
        return pd.DataFrame(
            [row.to_record() for row in self._rows], columns=PREVALENCE_COLUMNS
        )

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[PrevalenceRow]:
        return iter(self._rows)
