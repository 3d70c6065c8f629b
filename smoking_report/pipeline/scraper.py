from typing import Optional

from smoking_report.scraping.dataset import PrevalenceDataset
from smoking_report.scraping.exceptions import FetchError
from smoking_report.scraping.fetcher import fetch_page
from smoking_report.scraping.tables import (
    TableStatus,
    find_table_blocks,
    process_table_block,
)
from smoking_report.scraping.writer import write_prevalence_csv
from smoking_report.utils.constants import (
    CDC_BULK_DATA_URL,
    CDC_SMOKING_URL,
    DATASETS_FOLDER,
    PREVALENCE_CSV,
    REQUEST_TIMEOUT,
    TABLE_BLOCK_XPATH,
)
from smoking_report.utils.logger_config import get_logger

logger = get_logger("scraper", "data_scraping.log")


def collect_prevalence(
    url: str = CDC_SMOKING_URL,
    timeout: float = REQUEST_TIMEOUT,
    block_xpath: str = TABLE_BLOCK_XPATH,
) -> PrevalenceDataset:
    """Fetch the prevalence page and build the dataset from its tables.

    A fetch failure is logged and yields an empty dataset.
    """
    dataset = PrevalenceDataset()

    logger.info(f"Fetching prevalence tables from {url}")
    try:
        document = fetch_page(url, timeout=timeout)
    except FetchError as e:
        logger.error(f"Could not fetch prevalence page: {e}")
        logger.error(
            f"Try downloading the tables from the bulk data portal instead: "
            f"{CDC_BULK_DATA_URL}"
        )
        return dataset

    blocks = find_table_blocks(document, block_xpath)
    if not blocks:
        logger.warning("No table block found on the page")
        return dataset

    logger.info(f"Found {len(blocks)} table block(s)")

    for idx, block in enumerate(blocks):
        outcome = process_table_block(block, dataset, index=idx)

        if outcome.accepted:
            logger.info(
                f"Table {idx} ({outcome.category.label}) : {len(outcome.rows)} rows"
            )
            if outcome.unparsed_rows:
                logger.warning(
                    f"Table {idx} : {outcome.unparsed_rows} row(s) without a "
                    f"parsable percentage"
                )
        elif outcome.status is TableStatus.OTHER_CATEGORY:
            logger.info(f"Table {idx} skipped, header {outcome.header!r} not recognized")
        else:
            logger.warning(str(outcome.as_error(url)))

    logger.info(
        f"Collected {len(dataset)} prevalence rows over "
        f"{len(dataset.categories())} categories"
    )
    return dataset


def scrape_prevalence_data(
    url: str = CDC_SMOKING_URL,
    location: str = DATASETS_FOLDER,
    filename: str = PREVALENCE_CSV,
    timeout: float = REQUEST_TIMEOUT,
) -> PrevalenceDataset:
    """Scrape the prevalence tables and write them to csv.

    The returned dataset is empty when nothing could be scraped, in which
    case no file is written.
    """
    dataset = collect_prevalence(url=url, timeout=timeout)

    path: Optional[str] = write_prevalence_csv(dataset, location, filename)
    if path is None:
        logger.warning("No prevalence data available, csv not written")

    return dataset
