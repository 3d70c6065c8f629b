"""Scraping of the CDC adult smoking prevalence tables.

Exposes the page fetcher, the table classifier/extractor and the dataset
writer used by `smoking_report.pipeline.scraper`.
"""

from .categories import Category, classify_header
from .dataset import PrevalenceDataset, PrevalenceRow
from .exceptions import FetchError, MalformedTableError, UnparsablePercentageError
from .fetcher import fetch_page
from .tables import TableOutcome, TableStatus, find_table_blocks, process_table_block
from .writer import read_prevalence_csv, write_prevalence_csv

__all__ = [
    "Category",
    "classify_header",
    "PrevalenceDataset",
    "PrevalenceRow",
    "FetchError",
    "MalformedTableError",
    "UnparsablePercentageError",
    "fetch_page",
    "TableOutcome",
    "TableStatus",
    "find_table_blocks",
    "process_table_block",
    "read_prevalence_csv",
    "write_prevalence_csv",
]
