import pytest

from labstructs.turnstile import main, min_people, solve_cases


def test_empty_log_needs_nobody():
    assert min_people([]) == 0


def test_only_entries_each_need_a_person():
    changes = [1, 1, 1, 1]
    assert min_people(changes) == len(changes)


def test_only_exits_each_need_a_person():
    changes = [-1, -1, -1]
    assert min_people(changes) == len(changes)


def test_worked_example():
    assert min_people([1, -1, 1]) == 1


def test_answer_never_exceeds_length():
    for changes in ([1, -1, -1, 1], [-1, 1, 1, -1, -1], [1, 1, -1, 1, -1, -1]):
        assert 0 < min_people(changes) <= len(changes)


def test_reversing_symbols_keeps_answer():
    changes = [1, 1, -1, -1, -1, 1, 1]
    flipped = [-1 if c != -1 else 1 for c in changes]
    assert min_people(changes) == min_people(flipped)


def test_solve_cases_matches_min_people():
    text = "2\n3\n1 -1 1\n4\n-1 -1 1 1\n"
    assert solve_cases(text) == [
        min_people([1, -1, 1]),
        min_people([-1, -1, 1, 1]),
    ]


def test_solve_cases_with_no_cases():
    assert solve_cases("0") == []


def test_solve_cases_truncated_raises():
    with pytest.raises(ValueError):
        solve_cases("1\n4\n1 -1")


def test_solve_cases_non_integer_raises():
    with pytest.raises(ValueError):
        solve_cases("1\n2\n1 x")


def test_main_writes_case_lines(tmp_path):
    source = tmp_path / "input.txt"
    target = tmp_path / "output.txt"
    source.write_text("2\n2\n1 1\n1\n-1\n", encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines == [
        f"Case #1: {min_people([1, 1])}",
        f"Case #2: {min_people([-1])}",
    ]


def test_main_missing_input(tmp_path):
    assert main([str(tmp_path / "absent.txt"), str(tmp_path / "out.txt")]) == 2
    assert not (tmp_path / "out.txt").exists()