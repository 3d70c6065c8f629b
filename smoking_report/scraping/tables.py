"""Classification and row extraction for the tables of the prevalence page.

Every helper here returns values instead of logging: the pipeline driver
decides what to report for each `TableOutcome`.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from lxml import html

from smoking_report.scraping.categories import Category, classify_header
from smoking_report.scraping.dataset import PrevalenceDataset, PrevalenceRow
from smoking_report.scraping.exceptions import (
    MalformedTableError,
    UnparsablePercentageError,
)
from smoking_report.utils.constants import TABLE_BLOCK_XPATH

ROWS_XPATH = "./tr | ./thead/tr | ./tbody/tr | ./tfoot/tr"
CELLS_XPATH = "./th | ./td"


class TableStatus(Enum):
    EXTRACTED = "extracted"
    NO_TABLE = "no table in block"
    TOO_FEW_COLUMNS = "fewer than two columns"
    NO_DATA_ROWS = "no data rows"
    NO_HEADER = "no header cell"
    OTHER_CATEGORY = "unrecognized category"
    NO_PARSABLE_ROWS = "no parsable percentage"


@dataclass
class TableOutcome:
    """Result of handling one table block"""

    index: int
    status: TableStatus
    category: Category = Category.OTHER
    header: str = ""
    rows: List[PrevalenceRow] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.status is TableStatus.EXTRACTED

    @property
    def unparsed_rows(self) -> int:
        return sum(1 for row in self.rows if not row.has_prevalence)

    def as_error(self, url: str = "") -> Optional[MalformedTableError]:
        """Describe a rejected structure, None for accepted or uncategorized tables"""
        if self.status in (TableStatus.EXTRACTED, TableStatus.OTHER_CATEGORY):
            return None

        return MalformedTableError(
            f"Table {self.index} skipped: {self.status.value}",
            url,
            {"header": self.header or "-", "category": self.category.label},
        )


def cell_text(cell: html.HtmlElement) -> str:
    return " ".join(cell.text_content().split())


def find_table_blocks(
    document: html.HtmlElement, block_xpath: str = TABLE_BLOCK_XPATH
) -> List[html.HtmlElement]:
    """Container blocks of the page, in document order"""
    return document.xpath(block_xpath)


def first_table(block: html.HtmlElement) -> Optional[html.HtmlElement]:
    if block.tag == "table":
        return block

    tables = block.xpath(".//table")
    return tables[0] if tables else None


def split_table(table: html.HtmlElement) -> Tuple[List[str], List[List[str]]]:
    """
    Return the header cells and data rows of a table.

    The header is the `thead` row when there is one, else the first row.
    Rows of nested tables are ignored.
    """
    rows = table.xpath(ROWS_XPATH)
    if not rows:
        return [], []

    head_rows = table.xpath("./thead/tr")
    if head_rows:
        header_row = head_rows[0]
        body_rows = [row for row in rows if row.getparent().tag != "thead"]
    else:
        header_row = rows[0]
        body_rows = rows[1:]

    header = [cell_text(c) for c in header_row.xpath(CELLS_XPATH)]
    body = [[cell_text(c) for c in row.xpath(CELLS_XPATH)] for row in body_rows]

    return header, body


def to_percentage(text: str) -> float:
    """Parse "18.7%" into 18.7"""
    cleaned = text.replace("%", "").replace(",", "").strip()

    try:
        value = float(cleaned)
    except ValueError as e:
        raise UnparsablePercentageError(
            "Not a number", context={"text": text}
        ) from e

    if not math.isfinite(value):
        raise UnparsablePercentageError("Not a finite number", context={"text": text})

    return value


def parse_percentage(text: str) -> float:
    """Same as `to_percentage` but NaN when the text is not a finite number"""
    try:
        return to_percentage(text)
    except UnparsablePercentageError:
        return math.nan


def extract_rows(table: html.HtmlElement, category: Category) -> List[PrevalenceRow]:
    """
    Turn each two-column body row into a PrevalenceRow, order preserved.

    Rows without a group label or without a second cell are left out.
    """
    _, body = split_table(table)

    rows = []
    for cells in body:
        if len(cells) < 2 or not cells[0]:
            continue

        rows.append(
            PrevalenceRow(
                category=category,
                group=cells[0],
                percentage_text=cells[1],
                prevalence=parse_percentage(cells[1]),
            )
        )

    return rows


def inspect_table_block(block: html.HtmlElement, index: int = 0) -> TableOutcome:
    """Classify and extract one block without touching any dataset"""
    table = first_table(block)
    if table is None:
        return TableOutcome(index, TableStatus.NO_TABLE)

    header, body = split_table(table)
    if not header:
        return TableOutcome(index, TableStatus.NO_HEADER)

    n_columns = max(len(cells) for cells in [header] + body)
    if n_columns < 2:
        return TableOutcome(index, TableStatus.TOO_FEW_COLUMNS, header=header[0])

    category = classify_header(header[0])
    if category is Category.OTHER:
        return TableOutcome(
            index, TableStatus.OTHER_CATEGORY, category=category, header=header[0]
        )

    rows = extract_rows(table, category)
    if not rows:
        return TableOutcome(
            index, TableStatus.NO_DATA_ROWS, category=category, header=header[0]
        )

    if not any(row.has_prevalence for row in rows):
        return TableOutcome(
            index,
            TableStatus.NO_PARSABLE_ROWS,
            category=category,
            header=header[0],
            rows=rows,
        )

    return TableOutcome(
        index, TableStatus.EXTRACTED, category=category, header=header[0], rows=rows
    )


def process_table_block(
    block: html.HtmlElement, dataset: PrevalenceDataset, index: int = 0
) -> TableOutcome:
    """Inspect a block and append its rows to `dataset` when accepted"""
    outcome = inspect_table_block(block, index)

    if outcome.accepted:
        dataset.extend(outcome.rows)

    return outcome
