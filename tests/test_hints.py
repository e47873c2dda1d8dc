from wordle_game.services import KeyboardHints, score_guess

from .conftest import A, C, P


def test_first_fold_records_every_letter():
    hints = KeyboardHints()
    hints.fold("adieu", score_guess("adieu", "ivory"))
    assert hints.as_dict() == {'a': A, 'd': A, 'i': P, 'e': A, 'u': A}


def test_hint_upgrades():
    hints = KeyboardHints()
    hints.fold("rhino", score_guess("rhino", "ivory"))
    assert hints.get('i') is P
    hints.fold("ivory", score_guess("ivory", "ivory"))
    assert hints.get('i') is C
    assert hints.get('R') is C


def test_later_absent_never_downgrades():
    hints = KeyboardHints()
    hints.fold("steam", score_guess("steam", "cream"))
    assert hints.get('e') is C
    # 'e' is absent from 'lymph'
    hints.fold("eerie", score_guess("eerie", "lymph"))
    assert hints.get('e') is C


def test_duplicate_letter_within_one_guess_keeps_best():
    # 'eerie' vs 'beach': position 1 'e' is correct, the other two are absent
    result = score_guess("eerie", "beach")
    assert result == (A, C, A, A, A)
    hints = KeyboardHints()
    hints.fold("eerie", result)
    assert hints.get('e') is C


def test_clear():
    hints = KeyboardHints()
    hints.fold("adieu", score_guess("adieu", "ivory"))
    hints.clear()
    assert len(hints) == 0
    assert hints.get('a') is None
