# scoring/rubric.py
# Weighted rubric totals for a single judge's ratings of one presenter

from .constants import CRITERIA, CRITERIA_WEIGHTS
from .judges import clean_judge_name, judge_id_from_name, make_score_id
from .records import CriterionBreakdown, Score, ScoreCriteria

NO_SHOW_CRITERIA = ScoreCriteria(0, 0, 0, 0, 0, 0, 0)


def calculate_weighted_total(criteria):
    """
    Sum of each rating multiplied by its criterion weight.
    Ratings are not range-checked here: all 5s give 100, all 1s give 20.
    """
    return sum(
        getattr(criteria, field) * CRITERIA_WEIGHTS[field]
        for field, _, _ in CRITERIA
    )


def get_weighted_breakdown(criteria):
    """Per-criterion raw rating, weight and weighted value, for the audit view."""
    breakdown = []
    for field, label, weight in CRITERIA:
        raw = getattr(criteria, field)
        breakdown.append(CriterionBreakdown(
            criterion=label,
            raw_score=raw,
            weight=weight,
            weighted_score=raw * weight,
        ))
    return breakdown


def build_score(presenter_id, judge_name, criteria=None, is_no_show=False, timestamp=None):
    """
    Builds a Score with its derived fields filled in: the pair id,
    the judge id and the weighted total (0 for a no-show).
    """
    if criteria is None:
        criteria = NO_SHOW_CRITERIA
    judge_id = judge_id_from_name(judge_name)
    weighted_total = 0 if is_no_show else calculate_weighted_total(criteria)
    return Score(
        id=make_score_id(presenter_id, judge_id),
        presenter_id=presenter_id,
        judge_name=clean_judge_name(judge_name),
        judge_id=judge_id,
        criteria=criteria,
        weighted_total=weighted_total,
        is_no_show=is_no_show,
        timestamp=timestamp,
    )
