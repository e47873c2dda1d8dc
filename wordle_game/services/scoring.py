"""
Scoring Algorithm

Pure functions scoring a guess against a target.
"""

from collections import Counter
from typing import List, Optional

from ..models.errors import InvalidInput
from ..models.game import GuessResult, LetterVerdict


def score_guess(guess: str, target: str) -> GuessResult:
    """
    Implements the two-pass Wordle letter evaluation algorithm.

    Exact position matches consume the target's letter counts first, so a
    letter repeated in the guess more often than in the target is only marked
    PRESENT while unmatched occurrences remain.

    Args:
        guess: Candidate word, same length as target
        target: Hidden word

    Returns:
        GuessResult: One LetterVerdict per guessed letter, in position order

    Raises:
        InvalidInput: If guess and target lengths differ
    """
    if len(guess) != len(target):
        raise InvalidInput(
            f"Guess length {len(guess)} does not match target length {len(target)}"
        )

    remaining = Counter(target)
    verdicts: List[Optional[LetterVerdict]] = [None] * len(guess)

    # First pass: exact positions
    for i, (guessed, expected) in enumerate(zip(guess, target)):
        if guessed == expected:
            verdicts[i] = LetterVerdict.CORRECT
            remaining[guessed] -= 1

    # Second pass: left to right over what is left
    for i, guessed in enumerate(guess):
        if verdicts[i] is not None:
            continue
        if remaining[guessed] > 0:
            verdicts[i] = LetterVerdict.PRESENT
            remaining[guessed] -= 1
        else:
            verdicts[i] = LetterVerdict.ABSENT

    return tuple(verdicts)


def is_winning_result(result: GuessResult) -> bool:
    return bool(result) and all(verdict is LetterVerdict.CORRECT for verdict in result)
