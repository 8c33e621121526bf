from skyshooter.score import ScoreManager


def test_score_starts_at_zero():
    assert ScoreManager().score == 0


def test_add_score_accumulates():
    manager = ScoreManager()
    manager.add_score(10)
    manager.add_score(15)
    assert manager.score == 10 + 15


def test_negative_score_subtracts():
    manager = ScoreManager()
    manager.add_score(7)
    manager.add_score(-7)
    assert manager.score == 0