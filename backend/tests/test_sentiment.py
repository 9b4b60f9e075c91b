from trendbrief.core.sentiment import VaderScorer, negativity_from_raw, score_negativity

from conftest import KeywordScorer


def test_negativity_keeps_only_negative_portion() -> None:
    assert negativity_from_raw(-3.0) == 3.0
    assert negativity_from_raw(0.0) == 0.0
    assert negativity_from_raw(2.5) == 0.0


def test_negativity_is_monotonic() -> None:
    raws = [-7.0, -4.5, -1.0, -0.25, 0.0]
    values = [negativity_from_raw(r) for r in raws]

    assert values == sorted(values, reverse=True)
    assert all(v >= 0 for v in values)


def test_score_negativity_uses_supplied_scorer() -> None:
    scorer = KeywordScorer({"awful": -4.0, "great": 3.0})

    assert score_negativity("awful hinge", scorer) == 4.0
    assert score_negativity("great hinge", scorer) == 0.0
    assert scorer.calls == ["awful hinge", "great hinge"]


def test_vader_scorer_signs_and_scale() -> None:
    scorer = VaderScorer(scale=5.0)

    negative = scorer.score("This is terrible, awful and a total waste of money")
    positive = scorer.score("I love it, works great and feels amazing")

    assert -5.0 <= negative < -1.0
    assert 0.0 < positive <= 5.0
    assert scorer.score("") == 0.0


def test_vader_negativity_ranks_harsher_text_higher() -> None:
    scorer = VaderScorer()

    mild = score_negativity("The zipper is bad", scorer)
    harsh = score_negativity("The zipper is horrible, awful, useless garbage and I hate it", scorer)

    assert harsh > mild > 0.0
