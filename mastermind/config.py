"""
Single place to:
- Read settings from env (optionally from a local .env)
- Validate the symbol alphabet the API accepts
- Set up logging for the app

The engine itself never reads any of this; it works for any alphabet.
"""

import logging
import os

from dotenv import load_dotenv

# 1) Load env vars from .env if present
# dev convenience; in prod the platform injects env vars
load_dotenv()

APP_ENV = os.getenv("APP_ENV", "local")

# 2) Alphabet: classic game uses six letters A..F
ALPHABET = os.getenv("MASTERMIND_ALPHABET", "ABCDEF")
if not ALPHABET:
    raise RuntimeError("MASTERMIND_ALPHABET is empty. Set it to the allowed symbols, e.g. ABCDEF.")
if len(set(ALPHABET)) != len(ALPHABET):
    raise RuntimeError(f"MASTERMIND_ALPHABET has duplicate symbols: {ALPHABET!r}")

# 3) Upper bound on guesses per batch request
_max_batch = os.getenv("MASTERMIND_MAX_BATCH", "100")
try:
    MAX_BATCH = int(_max_batch)
except ValueError:
    raise RuntimeError(f"MASTERMIND_MAX_BATCH must be an integer, got {_max_batch!r}")
if MAX_BATCH < 1:
    raise RuntimeError(f"MASTERMIND_MAX_BATCH must be at least 1, got {MAX_BATCH}")

# 4) Log level must be a name logging knows (DEBUG, INFO, ...)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    raise RuntimeError(f"LOG_LEVEL {LOG_LEVEL!r} is not a logging level name.")


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
