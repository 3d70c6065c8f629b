import numpy as np
import pandas as pd
import pytest

REGIONS = ["northeast", "northwest", "southeast", "southwest"]


def build_insurance_df(n: int = 200, seed: int = 0) -> pd.DataFrame:
    """Synthetic insurance records where smoking drives charges up"""
    rng = np.random.default_rng(seed)

    age = rng.integers(18, 65, size=n)
    bmi = rng.normal(30, 5, size=n).round(2)
    children = rng.integers(0, 4, size=n)
    sex = rng.choice(["male", "female"], size=n)
    smoker = np.where(np.arange(n) % 5 == 0, "yes", "no")
    region = np.array([REGIONS[i % 4] for i in range(n)])

    charges = (
        2000
        + 250 * age
        + 100 * bmi
        + 400 * children
        + np.where(smoker == "yes", 22000, 0)
        + rng.normal(0, 1500, size=n)
    ).round(2)

    return pd.DataFrame(
        {
            "age": age,
            "sex": sex,
            "bmi": bmi,
            "children": children,
            "smoker": smoker,
            "region": region,
            "charges": charges,
        }
    )


def table_html(header, rows, thead=True):
    head = "".join(f"<th>{h}</th>" for h in header)
    body = "".join(
        "<tr>" + "".join(f"<td>{c}</td>" for c in row) + "</tr>" for row in rows
    )
    if thead:
        return f"<table><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>"
    return f"<table><tr>{head}</tr>{body}</table>"


def card_html(inner):
    return f'<div class="card mb-3"><div class="card-body">{inner}</div></div>'


def page_html(*cards):
    return "<html><body><main>" + "".join(cards) + "</main></body></html>"


@pytest.fixture
def insurance_df():
    return build_insurance_df()


@pytest.fixture
def prevalence_page():
    """Page with the recognized tables plus noise blocks"""
    return page_html(
        card_html(
            table_html(
                ["Sex", "Percentage"], [("Men", "13.1%"), ("Women", "10.1%")]
            )
        ),
        card_html("<p>No table in this card</p>"),
        card_html(
            table_html(
                ["Age Group", "Percentage"],
                [("18–24", "5.3%"), ("25–44", "12.6%"), ("45–64", "14.9%")],
            )
        ),
        card_html(table_html(["Year", "Percentage"], [("2021", "11.5%")])),
        card_html(
            table_html(
                ["Census_Region", "Percentage"],
                [("Northeast", "20.1%"), ("South", "22.4%")],
            )
        ),
        card_html(
            table_html(["Education", "Percentage"], [("GED", "n/a"), ("College", "-")])
        ),
    )
