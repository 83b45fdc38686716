from scoring import ScoreCriteria, build_score, calculate_weighted_total, get_weighted_breakdown
from scoring.constants import CRITERIA_WEIGHTS, MAX_WEIGHTED_SCORE


def test_weights_total_twenty():
    assert sum(CRITERIA_WEIGHTS.values()) == 20
    assert MAX_WEIGHTED_SCORE == 100


def test_weighted_total_bounds():
    assert calculate_weighted_total(ScoreCriteria(5, 5, 5, 5, 5, 5, 5)) == 100
    assert calculate_weighted_total(ScoreCriteria(1, 1, 1, 1, 1, 1, 1)) == 20


def test_weighted_total_uses_each_weight():
    # 4*5 + 5*4 + 2*3 + 3*2 + 2*1 + 2*2 + 2*3
    criteria = ScoreCriteria(5, 4, 3, 2, 1, 2, 3)
    assert calculate_weighted_total(criteria) == 20 + 20 + 6 + 6 + 2 + 4 + 6


def test_out_of_range_ratings_are_not_rejected():
    assert calculate_weighted_total(ScoreCriteria(6, 0, 0, 0, 0, 0, 0)) == 24


def test_breakdown_matches_total():
    criteria = ScoreCriteria(5, 4, 3, 2, 1, 2, 3)
    breakdown = get_weighted_breakdown(criteria)

    assert len(breakdown) == 7
    assert breakdown[0].criterion == 'Content - WHY (hypothesis/problem)'
    assert (breakdown[0].raw_score, breakdown[0].weight, breakdown[0].weighted_score) == (5, 4, 20)
    assert (breakdown[1].raw_score, breakdown[1].weight, breakdown[1].weighted_score) == (4, 5, 20)
    assert sum(item.weighted_score for item in breakdown) == calculate_weighted_total(criteria)


def test_build_score_derives_ids_and_total():
    score = build_score('1A-1', '  Susan  Bailey ', ScoreCriteria(4, 4, 4, 4, 4, 4, 4))

    assert score.judge_id == 'susan-bailey'
    assert score.id == '1A-1-susan-bailey'
    assert score.judge_name == 'Susan Bailey'
    assert score.weighted_total == 80
    assert not score.is_no_show


def test_no_show_total_is_zero():
    score = build_score('1A-1', 'Susan Bailey', ScoreCriteria(5, 5, 5, 5, 5, 5, 5), is_no_show=True)
    assert score.weighted_total == 0

    blank = build_score('1A-1', 'Susan Bailey', is_no_show=True)
    assert blank.weighted_total == 0
    assert blank.criteria.values() == (0,) * 7
