"""
Labels for clarity.
"""

from typing import Hashable, Sequence

Symbol = Hashable  # "A" -> "F" in the classic game, but any hashable works
Code = Sequence[Symbol]  # secret or guess; a plain str counts too
