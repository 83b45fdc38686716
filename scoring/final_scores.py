# scoring/final_scores.py
# Combines a presenter's normalized scores from their assigned judges

from .constants import THREE_JUDGE_COEFFICIENT, TWO_JUDGE_COEFFICIENT, UNDERGRAD_POSTER
from .judges import judge_names_match
from .normalization import generate_all_normalized_scores
from .records import FinalScore


def _find_slot_score(judge_name, presenter_scores):
    if not judge_name or not judge_name.strip():
        return None
    for ns in presenter_scores:
        if judge_names_match(ns.judge_name, judge_name):
            return ns
    return None


def calculate_final_score(presenter, normalized_scores):
    """
    Undergrad posters need all three judge slots scored:
        final = n1*33.33 + n2*33.33 + n3*33.33
    Oral and poster presentations need both judge slots:
        final = n1*50 + n2*50
    Otherwise the final score is None (not yet determinable).
    """
    presenter_scores = [ns for ns in normalized_scores if ns.presenter_id == presenter.id]

    judge1_score = _find_slot_score(presenter.judge1, presenter_scores)
    judge2_score = _find_slot_score(presenter.judge2, presenter_scores)
    judge3_score = _find_slot_score(presenter.judge3, presenter_scores)

    final_score = None
    if presenter.presentation_type == UNDERGRAD_POSTER:
        if judge1_score and judge2_score and judge3_score:
            final_score = (
                judge1_score.normalized_score * THREE_JUDGE_COEFFICIENT
                + judge2_score.normalized_score * THREE_JUDGE_COEFFICIENT
                + judge3_score.normalized_score * THREE_JUDGE_COEFFICIENT
            )
    else:
        if judge1_score and judge2_score:
            final_score = (
                judge1_score.normalized_score * TWO_JUDGE_COEFFICIENT
                + judge2_score.normalized_score * TWO_JUDGE_COEFFICIENT
            )

    return FinalScore(
        presenter_id=presenter.id,
        presenter=presenter,
        judge1_score=judge1_score,
        judge2_score=judge2_score,
        judge3_score=judge3_score,
        final_score=final_score,
    )


def generate_all_final_scores(presenters, scores):
    """Recomputes every presenter's final score from the full score set."""
    normalized_scores = generate_all_normalized_scores(scores)
    return [calculate_final_score(p, normalized_scores) for p in presenters]
