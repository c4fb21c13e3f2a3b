"""
Pure game logic (no HTTP, no storage).
We compute two feedback numbers for each guess:
- right_position: how many indices hold exactly the secret's symbol
- wrong_position: how many other guess symbols appear in the secret at a
  different index, after exact matches have used up their occurrences

Duplicates are allowed in both the secret and the guess. A symbol is never
counted twice: once an occurrence in the secret is claimed by an exact match
it is no longer available for a wrong-position match.
"""

import logging
from collections import Counter
from typing import Iterable, List, NamedTuple

from .types import Code

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Secret and guess cannot be compared (different lengths)."""


class Evaluation(NamedTuple):
    right_position: int
    wrong_position: int

    @property
    def total(self) -> int:
        return self.right_position + self.wrong_position

    def is_solved(self, length: int) -> bool:
        return self.right_position == length


def _check_lengths(secret: Code, guess: Code) -> None:
    if len(secret) != len(guess):
        logger.debug("rejecting guess of length %d for secret of length %d", len(guess), len(secret))
        raise InvalidInputError(
            f"Secret and guess must be the same length (secret has {len(secret)}, guess has {len(guess)})."
        )


def _count_right_positions(secret: Code, guess: Code, secret_counts: Counter) -> int:
    """
    Count exact matches and consume them from `secret_counts`.

    Each exact match removes one occurrence of its symbol from the table so the
    wrong-position pass can't claim it again.
    """
    right = 0
    for s, g in zip(secret, guess):
        if s == g:
            right += 1
            # never below zero; a missing entry reads as 0
            secret_counts[s] = max(secret_counts[s] - 1, 0)
    return right


def _count_wrong_positions(secret: Code, guess: Code, secret_counts: Counter) -> int:
    """
    Count misplaced symbols, capped by what is left in `secret_counts`.

    `seen` tracks how many times each mismatched guess symbol has come up so
    far. The n-th occurrence only scores while n <= the remaining secret count.
    """
    wrong = 0
    seen: Counter = Counter()
    for s, g in zip(secret, guess):
        if s == g:
            continue
        seen[g] += 1
        if seen[g] <= secret_counts[g]:
            wrong += 1
    return wrong


def evaluate(secret: Code, guess: Code) -> Evaluation:
    """
    Score `guess` against `secret`.

    Example:
      secret = "AABC"
      guess  = "ADFA"
      right_position = 1  (the first A)
      wrong_position = 1  (the last A; the secret still has one A left)
      Returns Evaluation(right_position=1, wrong_position=1)

    Raises InvalidInputError when the two sequences differ in length.
    Empty sequences are fine and score (0, 0).
    """
    _check_lengths(secret, guess)

    # 1. Exact matches; this mutates the frequency table
    secret_counts = Counter(secret)
    right = _count_right_positions(secret, guess, secret_counts)

    # 2. Misplaced matches against what is left over
    wrong = _count_wrong_positions(secret, guess, secret_counts)

    return Evaluation(right, wrong)


def evaluate_many(secret: Code, guesses: Iterable[Code]) -> List[Evaluation]:
    """Score several guesses against the same secret, in order."""
    return [evaluate(secret, guess) for guess in guesses]


def is_win(secret: Code, guess: Code) -> bool:
    """
    Win = every position matches.
    Unequal lengths are simply not a win (no exception here).
    """
    if len(secret) != len(guess):
        return False
    return all(s == g for s, g in zip(secret, guess))
