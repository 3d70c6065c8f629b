import os

import requests

from smoking_report.pipeline.scraper import collect_prevalence, scrape_prevalence_data
from smoking_report.scraping import fetcher
from smoking_report.scraping.categories import Category
from tests.test_fetcher import FakeResponse


def test_scrape_writes_recognized_tables(monkeypatch, tmp_path, prevalence_page):
    monkeypatch.setattr(
        fetcher.requests,
        "get",
        lambda url, headers, timeout: FakeResponse(200, prevalence_page.encode()),
    )

    dataset = scrape_prevalence_data(
        url="https://example.org/page", location=str(tmp_path), filename="out.csv"
    )

    assert len(dataset) == 7
    assert dataset.categories() == [
        Category.SEX,
        Category.AGE_GROUP,
        Category.CENSUS_REGION,
    ]
    assert os.path.exists(tmp_path / "out.csv")


def test_fetch_failure_gives_empty_dataset_and_no_file(monkeypatch, tmp_path):
    def fake_get(url, headers, timeout):
        raise requests.Timeout("timed out")

    monkeypatch.setattr(fetcher.requests, "get", fake_get)

    dataset = scrape_prevalence_data(
        url="https://example.org/page", location=str(tmp_path), filename="out.csv"
    )

    assert dataset.is_empty()
    assert not os.path.exists(tmp_path / "out.csv")


def test_page_without_blocks(monkeypatch):
    monkeypatch.setattr(
        fetcher.requests,
        "get",
        lambda url, headers, timeout: FakeResponse(200, b"<html><p>hi</p></html>"),
    )

    assert collect_prevalence(url="https://example.org/page").is_empty()
