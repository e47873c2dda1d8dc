"""
Keyboard Hints

Best-known verdict per letter, folded from every scored guess of a game.
"""

from typing import Dict, Optional

from ..models.game import GuessResult, LetterVerdict


class KeyboardHints:
    """
    Letter -> best LetterVerdict seen so far.

    A hint only ever moves up (ABSENT -> PRESENT -> CORRECT). A guess with a
    repeated letter can mark one occurrence ABSENT and another CORRECT; the
    ABSENT never erases what the other occurrence revealed.
    """

    def __init__(self):
        self._hints: Dict[str, LetterVerdict] = {}

    def fold(self, guess: str, result: GuessResult) -> None:
        """Updates hints from one scored guess."""
        for letter, verdict in zip(guess, result):
            current = self._hints.get(letter)
            if current is None or verdict.rank > current.rank:
                self._hints[letter] = verdict

    def get(self, letter: str) -> Optional[LetterVerdict]:
        return self._hints.get(letter.lower())

    def as_dict(self) -> Dict[str, LetterVerdict]:
        return dict(self._hints)

    def clear(self) -> None:
        self._hints.clear()

    def __len__(self) -> int:
        return len(self._hints)
