import argparse

from smoking_report.pipeline import (
    render_report,
    run_analysis,
    run_training,
    scrape_prevalence_data,
)
from smoking_report.utils.constants import CDC_SMOKING_URL, INSURANCE_DATA_URL
from smoking_report.utils.data_helper import load_insurance_data
from smoking_report.utils.logger_config import get_logger

logger = get_logger("Main", "main_file.log")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Run the insurance charges report and the prevalence scraper."
    )
    parser.add_argument(
        "--data",
        default=INSURANCE_DATA_URL,
        help="Path or URL of the insurance csv.",
    )
    parser.add_argument(
        "--url",
        default=CDC_SMOKING_URL,
        help="Page holding the smoking prevalence tables.",
    )
    parser.add_argument(
        "--no-scrape", action="store_true", help="Skip the prevalence scraper."
    )
    parser.add_argument("--no-analysis", action="store_true", help="Skip analysis.")
    parser.add_argument("--no-train", action="store_true", help="Skip training phase.")
    return parser.parse_args(argv)


def load_records(args):
    """Insurance records for analysis/training, None when unavailable or unneeded"""
    if args.no_analysis and args.no_train:
        logger.info("Analysis and training skipped, insurance data not loaded")
        return None

    try:
        return load_insurance_data(args.data)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load insurance data from {args.data}: {e}")
        return None


def main(argv=None):
    args = parse_args(argv)

    try:
        logger.info("Starting pipeline")

        df = load_records(args)

        summary, hypothesis_results, regression = {}, [], None
        if df is not None:
            summary, hypothesis_results = run_analysis(
                df, no_analysis=args.no_analysis
            )

            if not args.no_train:
                regression = run_training(df)
            else:
                logger.info("Training skipped (--no-train)")
        else:
            logger.warning("Insurance report : no data")

        prevalence = None
        if not args.no_scrape:
            prevalence = scrape_prevalence_data(url=args.url)
        else:
            logger.info("Scraping skipped (--no-scrape)")

        render_report(summary, hypothesis_results, regression, prevalence)

    except Exception as e:
        logger.critical(f"Fatal error: {e}", exc_info=True)
        raise

    finally:
        logger.info("Pipeline finished")


if __name__ == "__main__":
    main()
