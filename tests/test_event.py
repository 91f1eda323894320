import sqlite3

import pytest

from evenements.connection import Connection
from evenements.event import Event, EventRepository, EventValidationError


def make_event(name="Gala", **overrides):
    values = dict(
        name=name,
        theme="Musique",
        place="Tunis",
        type="Concert",
        audience="Etudiants",
        sponsors="Acme",
        budget=1500.0,
        programme="Ouverture puis concert",
    )
    values.update(overrides)
    return Event(**values)


@pytest.fixture
def repo(tmp_path):
    with Connection(tmp_path / "events.db") as conn:
        repository = EventRepository(conn)
        repository.create_schema()
        yield repository


def test_default_event_is_empty():
    event = Event()
    assert event.name == ""
    assert event.budget == 0.0


def test_validate_accepts_complete_event():
    event = make_event()
    event.validate()
    assert event.budget > 0


@pytest.mark.parametrize("field", ["name", "theme", "place", "type", "audience", "sponsors", "programme"])
def test_validate_rejects_empty_field(field):
    event = make_event(**{field: ""})
    with pytest.raises(EventValidationError):
        event.validate()


@pytest.mark.parametrize("budget", [0.0, -10.0])
def test_validate_rejects_non_positive_budget(budget):
    with pytest.raises(EventValidationError):
        make_event(budget=budget).validate()


def test_add_and_all_round_trip(repo):
    event = make_event()
    repo.add(event)
    assert repo.all() == [event]


def test_add_duplicate_name_fails(repo):
    repo.add(make_event())
    with pytest.raises(sqlite3.IntegrityError):
        repo.add(make_event())


def test_delete_removes_event(repo):
    repo.add(make_event("A"))
    repo.add(make_event("B"))
    assert repo.delete("A") == 1
    assert [e.name for e in repo.all()] == ["B"]


def test_delete_unknown_name_removes_nothing(repo):
    repo.add(make_event("A"))
    assert repo.delete("Z") == 0
    assert len(repo.all()) == 1


def test_update_changes_fields(repo):
    repo.add(make_event())
    changed = make_event(theme="Sport", sponsors="Globex", budget=900.0)
    assert repo.update(changed) == 1
    assert repo.all() == [changed]


def test_update_unknown_event_changes_nothing(repo):
    repo.add(make_event("A"))
    assert repo.update(make_event("Other")) == 0
    assert repo.all() == [make_event("A")]


def test_search_without_criteria_returns_all(repo):
    events = [make_event("A"), make_event("B")]
    for e in events:
        repo.add(e)
    assert repo.search() == events


def test_search_by_substring(repo):
    repo.add(make_event("Festival d'été", theme="Musique"))
    repo.add(make_event("Salon", theme="Technologie"))
    result = repo.search(theme="techno")
    assert [e.name for e in result] == ["Salon"]


def test_search_by_budget_bounds(repo):
    repo.add(make_event("Low", budget=100.0))
    repo.add(make_event("Mid", budget=500.0))
    repo.add(make_event("High", budget=2000.0))
    result = repo.search(budget_min=100.0, budget_max=500.0)
    assert sorted(e.name for e in result) == ["Low", "Mid"]


def test_search_combines_criteria(repo):
    repo.add(make_event("A", place="Tunis", audience="Enfants"))
    repo.add(make_event("B", place="Tunis", audience="Adultes"))
    repo.add(make_event("C", place="Sousse", audience="Enfants"))
    result = repo.search(place="Tunis", audience="Enfants")
    assert [e.name for e in result] == ["A"]


def test_search_sponsors_and_programme(repo):
    repo.add(make_event("A", sponsors="Acme", programme="Atelier"))
    repo.add(make_event("B", sponsors="Globex", programme="Atelier"))
    assert [e.name for e in repo.search(sponsors="glob", programme="atel")] == ["B"]