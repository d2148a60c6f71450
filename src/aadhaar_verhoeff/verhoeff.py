"""
Verhoeff Checksum Algorithm
Shared digit-folding engine behind Aadhaar validation and check digit generation
"""

from typing import Iterable, List, NamedTuple, Sequence, Tuple


# Multiplication table (Cayley table of the dihedral group D5)
MULTIPLICATION_TABLE: Tuple[Tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 2, 3, 4, 0, 6, 7, 8, 9, 5),
    (2, 3, 4, 0, 1, 7, 8, 9, 5, 6),
    (3, 4, 0, 1, 2, 8, 9, 5, 6, 7),
    (4, 0, 1, 2, 3, 9, 5, 6, 7, 8),
    (5, 9, 8, 7, 6, 0, 4, 3, 2, 1),
    (6, 5, 9, 8, 7, 1, 0, 4, 3, 2),
    (7, 6, 5, 9, 8, 2, 1, 0, 4, 3),
    (8, 7, 6, 5, 9, 3, 2, 1, 0, 4),
    (9, 8, 7, 6, 5, 4, 3, 2, 1, 0),
)

# Permutation table, row chosen by position % 8
PERMUTATION_TABLE: Tuple[Tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 5, 7, 6, 2, 8, 3, 0, 9, 4),
    (5, 8, 0, 3, 7, 9, 6, 1, 4, 2),
    (8, 9, 1, 6, 0, 4, 3, 5, 2, 7),
    (9, 4, 5, 3, 1, 2, 6, 8, 7, 0),
    (4, 2, 8, 6, 5, 7, 3, 9, 0, 1),
    (2, 7, 9, 3, 8, 0, 6, 4, 1, 5),
    (7, 0, 4, 6, 9, 1, 3, 2, 5, 8),
)

# Inverse table: D[c][INVERSE_TABLE[c]] == 0
INVERSE_TABLE: Tuple[int, ...] = (0, 4, 3, 2, 1, 5, 6, 7, 8, 9)


class FoldStep(NamedTuple):
    """One digit of a fold, as shown in the step-by-step breakdown"""

    position: int          # 1-based, counted from the right
    digit: int
    permutation_row: int   # position index % 8
    permuted: int
    before: int            # running checksum before this digit
    after: int             # running checksum after this digit


def _reversed_digits(digits: Iterable[int]) -> List[int]:
    values = list(digits)
    for digit in values:
        if not 0 <= digit <= 9:
            raise ValueError(f"digit must be between 0 and 9, got: {digit}")
    values.reverse()
    return values


def trace(digits: Iterable[int]) -> List[FoldStep]:
    """
    Fold a digit sequence and record every step

    Args:
        digits: Digits in natural order (most significant first)

    Returns:
        One FoldStep per digit, rightmost digit first
    """
    steps = []
    c = 0
    for i, digit in enumerate(_reversed_digits(digits)):
        row = i % 8
        permuted = PERMUTATION_TABLE[row][digit]
        after = MULTIPLICATION_TABLE[c][permuted]
        steps.append(FoldStep(i + 1, digit, row, permuted, c, after))
        c = after
    return steps


def fold(digits: Iterable[int]) -> int:
    """
    Run the Verhoeff fold over a digit sequence of any length

    The rightmost digit is position 0. An empty sequence folds to 0.

    Args:
        digits: Digits in natural order (most significant first)

    Returns:
        Final running checksum (0-9)
    """
    c = 0
    for i, digit in enumerate(_reversed_digits(digits)):
        c = MULTIPLICATION_TABLE[c][PERMUTATION_TABLE[i % 8][digit]]
    return c


def check_digit(digits: Sequence[int]) -> int:
    """
    Calculate the Verhoeff check digit for a digit sequence

    The check digit takes position 0 once appended, so the body is folded
    with a zero placeholder in that slot before taking the inverse.

    Args:
        digits: Digits without the check digit

    Returns:
        Check digit (0-9)
    """
    return INVERSE_TABLE[fold(list(digits) + [0])]


def is_valid(digits: Iterable[int]) -> bool:
    """True if the sequence, check digit included, folds to 0"""
    return fold(digits) == 0
