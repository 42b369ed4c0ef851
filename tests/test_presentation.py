import pytest

from assessment.features.challenges.presentation import NEUTRAL_BADGE, category_badge, difficulty_badge


@pytest.mark.parametrize(
    "difficulty,colour",
    [("easy", "green"), ("medium", "yellow"), ("hard", "red")],
)
def test_known_difficulties(difficulty, colour):
    assert colour in difficulty_badge(difficulty)


def test_known_categories():
    assert "purple" in category_badge("rls")
    assert "blue" in category_badge("storage")
    assert "orange" in category_badge("auth")
    assert "cyan" in category_badge("queries")
    assert "pink" in category_badge("migrations")


def test_unknown_values_are_neutral():
    assert difficulty_badge("extreme") == NEUTRAL_BADGE
    assert difficulty_badge(None) == NEUTRAL_BADGE
    assert category_badge("other") == NEUTRAL_BADGE
    assert category_badge("") == NEUTRAL_BADGE
