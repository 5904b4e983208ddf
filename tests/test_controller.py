"""Tests for FilterController setters and load lifecycle."""

import pytest

from filtro_devs.controller import FilterController
from filtro_devs.exceptions import DatasetUnavailableError
from filtro_devs.models import FilterParameters, MatchMode


@pytest.fixture
def rendered():
    return []


@pytest.fixture
def controller(rendered):
    return FilterController(
        renderer=rendered.append,
        params=FilterParameters(active_tags=frozenset({"java"})),
    )


def names(records):
    return [r.name for r in records]


def test_load_runs_first_pass(controller, raw_people, rendered):
    result = controller.load(raw_people)
    assert controller.loaded
    assert names(result) == ["Ana Índio", "Bruno"]
    assert len(rendered) == 1


def test_refresh_before_load_raises(controller):
    with pytest.raises(DatasetUnavailableError):
        controller.refresh()


def test_setters_before_load_only_store(controller, rendered):
    controller.set_search_term("Índio")
    controller.set_match_mode("all")
    assert controller.params.search_term == "indio"
    assert controller.params.match_mode is MatchMode.ALL
    assert rendered == []


def test_each_setter_refilters(controller, raw_people, rendered):
    controller.load(raw_people)

    controller.set_active_tag("Python", True)
    controller.set_match_mode(MatchMode.ALL)
    assert names(controller.results) == ["Bruno"]

    controller.set_match_mode("ou")
    controller.set_active_tag("python", False)
    controller.set_search_term("indio")
    assert names(controller.results) == ["Ana Índio"]

    # load + cinco setters
    assert len(rendered) == 6
    assert names(rendered[-1]) == ["Ana Índio"]


def test_search_term_is_normalized(controller, raw_people):
    controller.load(raw_people)
    controller.set_search_term("  Ana ÍND ")
    assert controller.params.search_term == "anaind"
    assert names(controller.results) == ["Ana Índio"]


def test_clearing_all_tags_in_any_mode(controller, raw_people):
    controller.load(raw_people)
    controller.set_active_tag("java", False)
    assert controller.params.active_tags == frozenset()
    assert controller.results == []


def test_load_twice_is_rejected(controller, raw_people):
    controller.load(raw_people)
    with pytest.raises(RuntimeError):
        controller.load(raw_people)


def test_unavailable_reason_is_kept(controller, raw_people):
    err = DatasetUnavailableError("http://x/devs", "timeout")
    controller.mark_unavailable(err)
    with pytest.raises(DatasetUnavailableError) as exc:
        controller.refresh()
    assert exc.value is err

    controller.load(raw_people)
    assert names(controller.refresh()) == ["Ana Índio", "Bruno"]


def test_results_is_a_copy(controller, raw_people):
    controller.load(raw_people)
    controller.results.clear()
    assert len(controller.results) == 2


def test_works_without_renderer(raw_people):
    controller = FilterController()
    assert controller.load(raw_people) == []
    controller.set_active_tag("java", True)
    assert len(controller.results) == 2
