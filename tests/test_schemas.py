"""
Testing request validation (symbols and batch size).
Lengths are not checked here; that is the engine's job.
"""

import pytest
from pydantic import ValidationError

from mastermind.config import MAX_BATCH
from mastermind.schemas import BatchEvaluateRequest, EvaluateRequest


def test_evaluate_request_accepts_alphabet_symbols():
    req = EvaluateRequest(secret="AABC", guess="FEDA")
    assert req.secret == "AABC"
    assert req.guess == "FEDA"


def test_evaluate_request_allows_mismatched_lengths():
    # the route turns this into a 400 via the engine
    req = EvaluateRequest(secret="AABC", guess="AB")
    assert len(req.guess) == 2


@pytest.mark.parametrize("secret,guess", [
    ("AABG", "ABCD"),   # G is outside A..F
    ("ABCD", "abcd"),   # symbols are case-sensitive
    ("ABCD", "AB D"),
])
def test_evaluate_request_rejects_unknown_symbols(secret, guess):
    with pytest.raises(ValidationError):
        EvaluateRequest(secret=secret, guess=guess)


def test_batch_request_checks_every_guess():
    with pytest.raises(ValidationError):
        BatchEvaluateRequest(secret="ABCD", guesses=["ABCD", "ABCZ"])


def test_batch_request_size_limit():
    ok = BatchEvaluateRequest(secret="AB", guesses=["AB"] * MAX_BATCH)
    assert len(ok.guesses) == MAX_BATCH

    with pytest.raises(ValidationError):
        BatchEvaluateRequest(secret="AB", guesses=["AB"] * (MAX_BATCH + 1))
