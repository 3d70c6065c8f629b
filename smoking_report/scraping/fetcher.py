import requests
from lxml import etree, html

from smoking_report.scraping.exceptions import FetchError
from smoking_report.utils.constants import REQUEST_TIMEOUT

HEADERS = {"User-Agent": "smoking-report/0.1 (+prevalence tables)"}


def fetch_page(url: str, timeout: float = REQUEST_TIMEOUT) -> html.HtmlElement:
    """Download `url` once and return its parsed HTML document.

    Raises FetchError on network failure, non-2xx status or markup that
    cannot be parsed.
    """
    try:
        resp = requests.get(url=url, headers=HEADERS, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError("Network error while fetching page", url, {"error": e}) from e

    if not 200 <= resp.status_code < 300:
        raise FetchError(
            "Unexpected HTTP status", url, {"status": resp.status_code}
        )

    return parse_page(resp.content, url)


def parse_page(content: bytes, url: str = "") -> html.HtmlElement:
    """Parse raw page bytes into an lxml document"""
    if not content or not content.strip():
        raise FetchError("Empty page body", url)

    try:
        return html.document_fromstring(content)
    except (etree.ParserError, ValueError) as e:
        raise FetchError("Malformed page markup", url, {"error": e}) from e
