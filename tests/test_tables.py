import math

from lxml import html

from smoking_report.scraping.categories import Category
from smoking_report.scraping.dataset import PrevalenceDataset
from smoking_report.scraping.exceptions import MalformedTableError
from smoking_report.scraping.tables import (
    TableStatus,
    extract_rows,
    find_table_blocks,
    first_table,
    inspect_table_block,
    parse_percentage,
    process_table_block,
    split_table,
)
from tests.conftest import card_html, page_html, table_html


def block_from(inner):
    return html.fragment_fromstring(card_html(inner))


def test_parse_percentage():
    assert parse_percentage("18.7%") == 18.7
    assert parse_percentage(" 22.4 % ") == 22.4
    assert parse_percentage("1,000") == 1000.0
    assert math.isnan(parse_percentage("n/a"))
    assert math.isnan(parse_percentage(""))
    assert math.isnan(parse_percentage("inf%"))


def test_census_region_scenario():
    """Rows keep the page order and parse the percentage"""
    block = block_from(
        table_html(
            ["Census_Region", "Percentage"],
            [("Northeast", "20.1%"), ("South", "22.4%")],
        )
    )
    dataset = PrevalenceDataset()

    outcome = process_table_block(block, dataset)

    assert outcome.status is TableStatus.EXTRACTED
    assert [(r.category, r.group, r.prevalence) for r in dataset] == [
        (Category.CENSUS_REGION, "Northeast", 20.1),
        (Category.CENSUS_REGION, "South", 22.4),
    ]
    assert dataset.rows[0].percentage_text == "20.1%"
    assert Category.CENSUS_REGION.label == "By U.S. Census Region"


def test_header_without_thead():
    block = block_from(
        table_html(["Sex", "Percentage"], [("Men", "13.1%")], thead=False)
    )

    header, body = split_table(first_table(block))

    assert header == ["Sex", "Percentage"]
    assert body == [["Men", "13.1%"]]


def test_extraction_is_idempotent():
    block = block_from(
        table_html(
            ["Age Group", "Percentage"], [("18–24", "5.3%"), ("25–44", "12.6%")]
        )
    )

    first = extract_rows(first_table(block), Category.AGE_GROUP)
    second = extract_rows(first_table(block), Category.AGE_GROUP)

    assert first == second
    assert len(first) == 2


def test_header_only_table_yields_no_rows():
    block = block_from(table_html(["Sex", "Percentage"], []))
    dataset = PrevalenceDataset()

    outcome = process_table_block(block, dataset)

    assert outcome.status is TableStatus.NO_DATA_ROWS
    assert outcome.rows == []
    assert dataset.is_empty()
    assert isinstance(outcome.as_error(), MalformedTableError)


def test_single_column_table_is_skipped():
    block = block_from("<table><tr><th>Sex</th></tr><tr><td>Men</td></tr></table>")

    outcome = inspect_table_block(block)

    assert outcome.status is TableStatus.TOO_FEW_COLUMNS


def test_block_without_table():
    outcome = inspect_table_block(block_from("<p>Nothing here</p>"))

    assert outcome.status is TableStatus.NO_TABLE
    assert "no table" in str(outcome.as_error("https://example.org"))


def test_other_category_is_not_an_error():
    block = block_from(table_html(["Year", "Percentage"], [("2021", "11.5%")]))
    dataset = PrevalenceDataset()

    outcome = process_table_block(block, dataset)

    assert outcome.status is TableStatus.OTHER_CATEGORY
    assert outcome.as_error() is None
    assert dataset.is_empty()


def test_table_without_any_parsable_percentage_is_discarded():
    block = block_from(
        table_html(["Education", "Percentage"], [("GED", "n/a"), ("College", "-")])
    )
    dataset = PrevalenceDataset()

    outcome = process_table_block(block, dataset)

    assert outcome.status is TableStatus.NO_PARSABLE_ROWS
    assert len(outcome.rows) == 2
    assert dataset.is_empty()


def test_unparsable_row_kept_when_a_sibling_parses():
    block = block_from(
        table_html(
            ["Race/Ethnicity", "Percentage"],
            [("White", "12.0%"), ("Other", "*")],
        )
    )
    dataset = PrevalenceDataset()

    outcome = process_table_block(block, dataset)

    assert outcome.accepted
    assert outcome.unparsed_rows == 1
    assert len(dataset) == 2
    assert dataset.rows[1].percentage_text == "*"
    assert math.isnan(dataset.rows[1].prevalence)


def test_nested_tables_use_the_outer_one():
    inner = table_html(["Year", "Percentage"], [("2020", "1%")])
    outer = (
        "<table><thead><tr><th>Sex</th><th>Percentage</th></tr></thead>"
        "<tbody><tr><td>Men</td><td>13.1%</td></tr>"
        "<tr><td>Women</td><td>10.1%</td></tr>"
        f'<tr><td colspan="2">{inner}</td></tr></tbody></table>'
    )
    dataset = PrevalenceDataset()

    outcome = process_table_block(block_from(outer), dataset)

    assert outcome.category is Category.SEX
    assert [r.group for r in dataset] == ["Men", "Women"]


def test_tables_are_appended_in_page_order(prevalence_page):
    document = html.document_fromstring(prevalence_page)
    dataset = PrevalenceDataset()

    blocks = find_table_blocks(document)
    statuses = [
        process_table_block(block, dataset, index=i).status
        for i, block in enumerate(blocks)
    ]

    assert statuses == [
        TableStatus.EXTRACTED,
        TableStatus.NO_TABLE,
        TableStatus.EXTRACTED,
        TableStatus.OTHER_CATEGORY,
        TableStatus.EXTRACTED,
        TableStatus.NO_PARSABLE_ROWS,
    ]
    assert dataset.categories() == [
        Category.SEX,
        Category.AGE_GROUP,
        Category.CENSUS_REGION,
    ]
    assert len(dataset) == 7


def test_rows_from_repeated_categories_are_not_merged():
    document = html.document_fromstring(
        page_html(
            card_html(table_html(["Sex", "%"], [("Men", "13.1%")])),
            card_html(table_html(["Sex", "%"], [("Men", "13.1%")])),
        )
    )
    dataset = PrevalenceDataset()

    for block in find_table_blocks(document):
        process_table_block(block, dataset)

    assert len(dataset) == 2
    assert dataset.rows[0] == dataset.rows[1]


def test_nested_cards_count_their_table_once():
    inner_card = card_html(table_html(["Sex", "Percentage"], [("Men", "13.1%")]))
    document = html.document_fromstring(page_html(card_html(inner_card)))
    dataset = PrevalenceDataset()

    blocks = find_table_blocks(document)
    for block in blocks:
        process_table_block(block, dataset)

    assert len(blocks) == 1
    assert [r.group for r in dataset] == ["Men"]
