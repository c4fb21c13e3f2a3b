'''
Mastermind evaluator API (stateless)

Endpoints:
POST /evaluate             -> score one guess against a secret
POST /evaluate/batch       -> score many guesses against one secret
GET  /alphabet             -> symbols this service accepts
GET  /health               -> liveness check

Nothing is stored: every request carries its own secret.
'''

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .config import ALPHABET, APP_ENV, configure_logging
from .engine import Evaluation, evaluate, evaluate_many, is_win
from .schemas import (
    AlphabetOut,
    BatchEvaluateRequest,
    BatchEvaluationOut,
    EvaluateRequest,
    EvaluationOut,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Mastermind Evaluator API", version="1.0.0")

# Allow everything in dev so the docs and any front-end work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

# --- Tests configure logging through pytest; everywhere else we do it here ---
if APP_ENV != "test":
    @app.on_event("startup")
    def _configure_logging():
        configure_logging()


def _to_out(result: Evaluation, secret: str, guess: str) -> EvaluationOut:
    return EvaluationOut(
        secret_length=len(secret),
        right_position=result.right_position,
        wrong_position=result.wrong_position,
        solved=is_win(secret, guess),
    )

# ---------------- Routes ----------------

@app.post("/evaluate", response_model=EvaluationOut, summary="Score one guess")
def evaluate_guess(payload: EvaluateRequest) -> EvaluationOut:
    # engine raises InvalidInputError (a ValueError) on a length mismatch
    try:
        result = evaluate(payload.secret, payload.guess)
    except ValueError as ve:
        logger.info("rejected guess: %s", ve)
        raise HTTPException(status_code=400, detail=str(ve))
    return _to_out(result, payload.secret, payload.guess)


@app.post("/evaluate/batch", response_model=BatchEvaluationOut, summary="Score several guesses")
def evaluate_batch(payload: BatchEvaluateRequest) -> BatchEvaluationOut:
    """
    All guesses are scored against the same secret, in request order.
    One bad guess fails the whole batch with 400.
    """
    try:
        results = evaluate_many(payload.secret, payload.guesses)
    except ValueError as ve:
        logger.info("rejected batch: %s", ve)
        raise HTTPException(status_code=400, detail=str(ve))
    return BatchEvaluationOut(
        results=[_to_out(r, payload.secret, g) for r, g in zip(results, payload.guesses)]
    )


@app.get("/alphabet", response_model=AlphabetOut, summary="Accepted symbols")
def get_alphabet() -> AlphabetOut:
    return AlphabetOut(alphabet=ALPHABET)


@app.get("/health", summary="Liveness check")
def health() -> dict:
    return {"status": "ok"}
