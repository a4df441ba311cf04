import pytest

from household import codec
from household.schemas import DEFAULT_SCENARIO, InvalidScenario, ScenarioParameters
from webapp.core.chart import build_income_figure
from webapp.core.session import ScenarioSession, slider_result, slider_start


def test_no_token_uses_defaults():
    session = ScenarioSession()
    assert session.params == DEFAULT_SCENARIO
    assert session.source == "default"


def test_bad_token_uses_defaults():
    session = ScenarioSession("not-a-valid-token")
    assert session.params == DEFAULT_SCENARIO
    assert session.source == "default"


def test_shared_token_is_loaded():
    shared = ScenarioParameters.create(6000, 2000, 5, 25)
    session = ScenarioSession(codec.encode(shared))
    assert session.params == shared
    assert session.source == "shared"


def test_chart_data_recomputed_only_on_change():
    session = ScenarioSession()
    first = session.chart_data
    assert session.chart_data is first

    session.update(variable_expenses=3000)
    assert session.chart_data is first

    session.update(variable_expenses=4000)
    second = session.chart_data
    assert second is not first
    assert second[0].without_childcare > first[0].without_childcare


def test_update_validates():
    session = ScenarioSession()
    with pytest.raises(InvalidScenario):
        session.update(tax_rate=100)
    assert session.params == DEFAULT_SCENARIO


def test_share_url_uses_base():
    session = ScenarioSession()
    url = session.share_url("https://example.org/")
    assert url.startswith("https://example.org/?scenario=")


def test_notes_mention_tax_rate():
    assert ScenarioSession().notes()[0] == "All calculations assume a 41% effective tax rate"


def test_figure_has_series_and_reference_line():
    fig = build_income_figure(ScenarioSession().chart_data)
    assert [t.name for t in fig.data] == [
        "Required Income (With Childcare)",
        "Required Income (No Childcare)",
        "Take Home Pay (After Expenses)",
    ]
    assert all(len(t.x) == 37 for t in fig.data)
    shapes = fig.layout.shapes
    assert len(shapes) == 1
    assert shapes[0].y0 == 75000
    assert fig.layout.annotations[0].text == "Median Household Income"


def _token_with_plus():
    for variable in range(1000, 10001, 500):
        for savings in range(0, 21):
            token = codec.encode(ScenarioParameters.create(variable, 3000, savings, 41))
            if "+" in token:
                return token
    raise AssertionError("no token with '+' in the slider range")


def test_from_query_reads_plus_sent_as_space():
    token = _token_with_plus()
    session = ScenarioSession.from_query({"scenario": token.replace("+", " ")})
    assert session.source == "shared"
    assert session.params == codec.decode(token)


def test_from_query_without_token():
    session = ScenarioSession.from_query({})
    assert session.source == "default"
    assert session.params == DEFAULT_SCENARIO


def test_slider_start_clamps_to_range():
    assert slider_start(500, (1000, 10000, 500)) == 1000
    assert slider_start(12.5, (0, 20, 1)) == 12
    assert slider_start(3000, (1000, 10000, 500)) == 3000


def test_untouched_slider_keeps_shared_value():
    assert slider_result(12.5, (0, 20, 1), 12) == 12.5
    assert slider_result(500, (1000, 10000, 500), 1000) == 500


def test_moved_slider_takes_new_value():
    assert slider_result(12.5, (0, 20, 1), 15) == 15
    assert slider_result(500, (1000, 10000, 500), 2500) == 2500
