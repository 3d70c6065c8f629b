import re
from enum import Enum
from typing import List, Pattern, Tuple


class Category(Enum):
    """Demographic groupings a scraped prevalence table can belong to"""

    SEX = "By Sex"
    AGE_GROUP = "By Age Group"
    RACE_ETHNICITY = "By Race/Ethnicity"
    CENSUS_REGION = "By U.S. Census Region"
    EDUCATION = "By Education"
    INSURANCE_COVERAGE = "By Health Insurance Coverage"
    OTHER = "Other"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "Category":
        for category in cls:
            if category.value == label:
                return category
        raise ValueError(f"Unknown category label: {label!r}")


# Evaluated in order, first match wins.
# "Sex" must lead the cell and not be followed by an age mention,
# so that e.g. "Sex by Age Group" stays an age table.
CATEGORY_KEYWORDS: List[Tuple[Category, str]] = [
    (Category.SEX, r"^\W*(sex|gender)\b(?!.*(age[\s_\-]*group|\bage\b))"),
    (Category.AGE_GROUP, r"age[\s_\-]*group|\bage\b"),
    (Category.RACE_ETHNICITY, r"race|ethnicity"),
    (Category.CENSUS_REGION, r"census[\s_\-]*region|region"),
    (Category.EDUCATION, r"education"),
    (Category.INSURANCE_COVERAGE, r"insurance|coverage"),
]
CATEGORY_PATTERNS: List[Tuple[Category, Pattern[str]]] = [
    (category, re.compile(keywords, re.IGNORECASE))
    for category, keywords in CATEGORY_KEYWORDS
]


def classify_header(header_text: str) -> Category:
    """Map the first header cell of a table to its category"""
    text = " ".join(header_text.split())

    for category, pattern in CATEGORY_PATTERNS:
        if pattern.search(text):
            return category

    return Category.OTHER
