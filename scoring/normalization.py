# scoring/normalization.py
# Judge leniency normalization: each raw weighted total is divided by the
# mean weighted total of the judge who gave it.

import logging

from .records import NormalizedScore

logger = logging.getLogger(__name__)


def calculate_judge_average(scores, judge_id):
    """
    Mean weighted total over the judge's non-no-show scores.
    Returns 0 when the judge has none; callers treat 0 as "no baseline".
    """
    totals = [s.weighted_total for s in scores if s.judge_id == judge_id and not s.is_no_show]
    if not totals:
        return 0
    return sum(totals) / len(totals)


def normalize_score(score, judge_average):
    # 1.0 means exactly this judge's own average
    normalized = score.weighted_total / judge_average if judge_average > 0 else 0
    return NormalizedScore(
        score_id=score.id,
        presenter_id=score.presenter_id,
        judge_id=score.judge_id,
        judge_name=score.judge_name,
        weighted_total=score.weighted_total,
        judge_average=judge_average,
        normalized_score=normalized,
    )


def generate_all_normalized_scores(scores):
    """
    Normalizes every non-no-show score against its judge's average.
    Judges are discovered from the scores themselves, in first-seen order.
    """
    judge_averages = {}
    for score in scores:
        if score.judge_id not in judge_averages:
            judge_averages[score.judge_id] = calculate_judge_average(scores, score.judge_id)

    for judge_id, average in judge_averages.items():
        if average == 0:
            logger.debug('Judge %s has no scored presenters yet, normalizing to 0', judge_id)

    return [
        normalize_score(score, judge_averages[score.judge_id])
        for score in scores
        if not score.is_no_show
    ]
