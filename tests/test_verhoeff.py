import pytest

from aadhaar_verhoeff.verhoeff import (
    INVERSE_TABLE,
    MULTIPLICATION_TABLE,
    PERMUTATION_TABLE,
    FoldStep,
    check_digit,
    fold,
    is_valid,
    trace,
)


def digits(text):
    return [int(ch) for ch in text]


# Tables
def test_table_shapes():
    assert len(MULTIPLICATION_TABLE) == 10
    assert all(len(row) == 10 for row in MULTIPLICATION_TABLE)
    assert len(PERMUTATION_TABLE) == 8
    assert all(sorted(row) == list(range(10)) for row in PERMUTATION_TABLE)
    assert INVERSE_TABLE == (0, 4, 3, 2, 1, 5, 6, 7, 8, 9)


def test_identity_rows():
    assert MULTIPLICATION_TABLE[0] == tuple(range(10))
    assert MULTIPLICATION_TABLE[1] == (1, 2, 3, 4, 0, 6, 7, 8, 9, 5)
    assert PERMUTATION_TABLE[0] == tuple(range(10))


@pytest.mark.parametrize("c", range(10))
def test_inverse_table_cancels(c):
    assert MULTIPLICATION_TABLE[c][INVERSE_TABLE[c]] == 0


def test_tables_are_immutable():
    with pytest.raises(TypeError):
        MULTIPLICATION_TABLE[0][0] = 5


# Fold
def test_fold_empty_sequence():
    assert fold([]) == 0
    assert fold(()) == 0


def test_fold_known_vectors():
    assert fold(digits("2363")) == 0
    assert fold(digits("234123412346")) == 0
    assert fold(digits("240537802892")) == 3


def test_fold_accepts_any_length():
    assert fold([5]) == 5
    assert fold(digits("0" * 30)) in range(10)


def test_fold_rejects_out_of_range_digit():
    with pytest.raises(ValueError):
        fold([1, 2, 10])


# Trace
def test_trace_matches_hand_calculation():
    assert trace(digits("2363")) == [
        FoldStep(position=1, digit=3, permutation_row=0, permuted=3, before=0, after=3),
        FoldStep(position=2, digit=6, permutation_row=1, permuted=3, before=3, after=1),
        FoldStep(position=3, digit=3, permutation_row=2, permuted=3, before=1, after=4),
        FoldStep(position=4, digit=2, permutation_row=3, permuted=1, before=4, after=0),
    ]


def test_trace_final_step_equals_fold():
    number = digits("240537802892")
    steps = trace(number)
    assert len(steps) == 12
    assert steps[-1].after == fold(number)
    assert [s.permutation_row for s in steps[8:]] == [0, 1, 2, 3]


def test_trace_empty():
    assert trace([]) == []


# Check digit
def test_check_digit_known():
    assert check_digit(digits("236")) == 3
    assert check_digit(digits("23412341234")) == 6
    assert check_digit(digits("12345678901")) == 0


def test_check_digit_appended_is_valid():
    for body in ("1", "75872", "12345678901", "9" * 20):
        d = digits(body)
        assert is_valid(d + [check_digit(d)])


def test_is_valid():
    assert is_valid(digits("2363"))
    assert not is_valid(digits("2364"))
