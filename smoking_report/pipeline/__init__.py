"""Pipeline helpers for scraping, analysis, training and reporting.

Expose the high-level functions used by `main.py` so the main script
remains small and easy to maintain.
"""

from .scraper import scrape_prevalence_data
from .analysis import run_analysis
from .training import run_training
from .report import render_report

__all__ = ["scrape_prevalence_data", "run_analysis", "run_training", "render_report"]
