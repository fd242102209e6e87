import itertools

import pytest

from typing_exam.core.errors import NotFound
from typing_exam.services.passages import PassageRepository, slugify


def _fixed_clock(start=1_000):
    counter = itertools.count(start)
    return lambda: next(counter)


def test_slugify():
    assert slugify("The Quick Brown Fox!") == "the-quick-brown-fox"
    assert slugify("   ") == "passage"


def test_add_derives_id_from_title_and_time():
    repo = PassageRepository(clock=lambda: 42)
    pid = repo.add("Digital India", "text", 2)
    assert pid == "digital-india-42"
    p = repo.get(pid)
    assert p.title == "Digital India"
    assert p.time_minutes == 2


def test_same_title_same_tick_gets_distinct_ids():
    repo = PassageRepository(clock=lambda: 7)
    a = repo.add("Same", "a", 1)
    b = repo.add("Same", "b", 1)
    assert a != b
    assert len(repo) == 2


def test_list_sorted_by_id():
    repo = PassageRepository(clock=_fixed_clock())
    repo.add("Zebra", "z", 1)
    repo.add("apple", "a", 1)
    repo.add("Mango", "m", 1)
    ids = [p.id for p in repo.list()]
    assert ids == sorted(ids)
    assert [p.title for p in repo.list()] == ["apple", "Mango", "Zebra"]


def test_list_reflects_mutations():
    repo = PassageRepository(clock=_fixed_clock())
    assert repo.list() == []
    pid = repo.add("One", "1", 1)
    assert len(repo.list()) == 1
    repo.delete(pid)
    assert repo.list() == []


def test_update_keeps_id():
    repo = PassageRepository(clock=_fixed_clock())
    pid = repo.add("One", "1", 1)
    repo.update(pid, "One (edited)", "11", 3)
    p = repo.get(pid)
    assert p.id == pid
    assert p.title == "One (edited)"
    assert p.content == "11"
    assert p.time_minutes == 3


def test_update_and_delete_missing():
    repo = PassageRepository()
    with pytest.raises(NotFound):
        repo.update("missing", "t", "c", 1)
    with pytest.raises(NotFound):
        repo.delete("missing")
    with pytest.raises(NotFound):
        repo.get("missing")
