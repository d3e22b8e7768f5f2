import random

import pytest

from webshell.history import History


@pytest.fixture
def abc():
    history = History("a")
    history.push("b")
    history.push("c")
    return history


def test_new_history_has_single_entry():
    history = History("https://example.com")
    assert history.entries == ["https://example.com"]
    assert history.index == 0
    assert history.current() == "https://example.com"
    assert len(history) == 1


def test_initial_location_is_not_validated():
    history = History("not a url")
    assert history.current() == "not a url"


def test_push_moves_to_new_entry(abc):
    assert abc.current() == "c"
    assert abc.entries == ["a", "b", "c"]
    assert abc.index == 2


def test_back_and_forward_walk_history(abc):
    assert abc.back() == "b"
    assert abc.current() == "b"
    assert abc.back() == "a"
    assert abc.back() is None
    assert abc.current() == "a"

    assert abc.forward() == "b"
    assert abc.forward() == "c"
    assert abc.forward() is None
    assert abc.current() == "c"


def test_push_same_location_is_noop():
    history = History("a")
    history.push("a")
    assert history.current() == "a"
    assert history.entries == ["a"]


def test_push_current_location_mid_history_keeps_forward_entries(abc):
    abc.back()
    abc.push("b")
    assert abc.entries == ["a", "b", "c"]
    assert abc.index == 1
    assert abc.forward() == "c"


def test_push_mid_history_drops_forward_branch(abc):
    abc.back()
    abc.push("d")
    assert abc.entries == ["a", "b", "d"]
    assert abc.current() == "d"
    assert abc.forward() is None


def test_push_from_start_drops_everything_after():
    history = History("a")
    for location in ["b", "c", "d"]:
        history.push(location)
    history.back()
    history.back()
    history.back()
    history.push("e")
    assert history.entries == ["a", "e"]


def test_non_adjacent_duplicates_are_kept():
    history = History("a")
    history.push("b")
    history.push("a")
    assert history.entries == ["a", "b", "a"]


def test_boundaries_leave_state_unchanged(abc):
    assert abc.forward() is None
    assert (abc.entries, abc.index) == (["a", "b", "c"], 2)

    abc.back()
    abc.back()
    assert abc.back() is None
    assert (abc.entries, abc.index) == (["a", "b", "c"], 0)


def test_can_go_back_and_forward(abc):
    assert abc.can_go_back()
    assert not abc.can_go_forward()
    abc.back()
    abc.back()
    assert not abc.can_go_back()
    assert abc.can_go_forward()


def test_entries_is_a_copy(abc):
    abc.entries.append("z")
    abc.entries.clear()
    assert abc.entries == ["a", "b", "c"]


@pytest.mark.parametrize("seed", range(20))
def test_random_walk_properties(seed):
    rng = random.Random(seed)
    history = History("start")
    locations = ["a", "b", "c", "d", "start"]

    for _ in range(200):
        op = rng.choice(["push", "push_current", "back", "forward", "round_trip"])
        before = (history.entries, history.index, history.current())

        if op == "push":
            history.push(rng.choice(locations))
        elif op == "push_current":
            history.push(history.current())
            assert (history.entries, history.index, history.current()) == before
        elif op == "back":
            if history.back() is None:
                assert before[1] == 0
                assert (history.entries, history.index) == before[:2]
        elif op == "forward":
            if history.forward() is None:
                assert before[1] == len(before[0]) - 1
                assert (history.entries, history.index) == before[:2]
        elif op == "round_trip":
            if history.back() is not None:
                assert history.forward() == before[2]

        assert history.current() is not None
        assert 0 <= history.index < len(history)


def test_replace_current_keeps_other_entries(abc):
    abc.back()
    abc.replace_current("B")
    assert abc.entries == ["a", "B", "c"]
    assert abc.index == 1
    assert abc.forward() == "c"
