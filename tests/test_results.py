from typing_exam.services.results import ResultLedger


def test_submit_returns_id_from_mobile_and_time():
    ledger = ResultLedger(clock=lambda: 500)
    rid = ledger.submit("Alice", "9990001111", "Digital India", 40, 95, 2)
    assert rid == "9990001111-500"
    [r] = ledger.list()
    assert r.user_name == "Alice"
    assert r.wpm == 40
    assert r.accuracy == 95
    assert r.mistakes == 2
    assert r.timestamp == 500


def test_list_follows_submission_order_even_with_frozen_clock():
    ledger = ResultLedger(clock=lambda: 100)
    first = ledger.submit("A", "1111", "P", 10, 90, 1)
    second = ledger.submit("A", "1111", "P", 20, 80, 2)
    third = ledger.submit("B", "2222", "P", 30, 70, 3)
    items = ledger.list()
    assert [r.id for r in items] == [first, second, third]
    assert len({r.id for r in items}) == 3
    assert [r.timestamp for r in items] == sorted(r.timestamp for r in items)


def test_clock_going_backwards_keeps_order():
    ticks = iter([300, 200, 100])
    ledger = ResultLedger(clock=lambda: next(ticks))
    a = ledger.submit("A", "1", "P", 1, 1, 0)
    b = ledger.submit("B", "2", "P", 2, 2, 0)
    c = ledger.submit("C", "3", "P", 3, 3, 0)
    assert [r.id for r in ledger.list()] == [a, b, c]
