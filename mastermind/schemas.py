"""
Explicit validation & Pydantic models
- Models validate and serialize the data exchanged with clients.
- Symbol checks live here; length checks happen in the engine, because the
  right length depends on the secret sent with the same request.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator

from .config import ALPHABET, MAX_BATCH


def _check_symbols(code: str) -> str:
    index = 0
    while index < len(code):
        symbol = code[index]
        if symbol not in ALPHABET:
            raise ValueError(f"Symbol {symbol!r} at position {index} is not one of {ALPHABET}.")
        index += 1
    return code


# 1. A single secret/guess pair to score
class EvaluateRequest(BaseModel):
    secret: str = Field(..., description=f"The secret code, one symbol per character from {ALPHABET}")
    guess: str = Field(..., description="The guess to score; must be as long as the secret")

    @field_validator("secret", "guess")
    @classmethod
    def validate_symbols(cls, code: str) -> str:
        return _check_symbols(code)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"secret": "AABC", "guess": "ADFA"},
                {"secret": "ABCD", "guess": "CDBA"},
            ]
        }
    }


# 2. Several guesses against the same secret
class BatchEvaluateRequest(BaseModel):
    secret: str = Field(..., description="The secret code")
    guesses: List[str] = Field(..., description=f"Guesses to score in order (at most {MAX_BATCH})")

    @field_validator("secret")
    @classmethod
    def validate_secret(cls, code: str) -> str:
        return _check_symbols(code)

    @field_validator("guesses")
    @classmethod
    def validate_guesses(cls, guesses: List[str]) -> List[str]:
        if len(guesses) > MAX_BATCH:
            raise ValueError(f"At most {MAX_BATCH} guesses per batch.")
        for guess in guesses:
            _check_symbols(guess)
        return guesses


# 3. Feedback for one guess
class EvaluationOut(BaseModel):
    secret_length: int = Field(..., description="Number of positions in the secret")
    right_position: int = Field(..., description="Symbols in the right position")
    wrong_position: int = Field(..., description="Symbols present in the secret but at another position")
    solved: bool = Field(..., description="True when every position is right")


# 4. Feedback for a batch, same order as the request
class BatchEvaluationOut(BaseModel):
    results: List[EvaluationOut] = Field(..., description="One entry per guess")


class AlphabetOut(BaseModel):
    alphabet: str = Field(..., description="Symbols accepted by this service")
