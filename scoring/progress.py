# scoring/progress.py
# Scoring progress: how many of the required judge scores have arrived.
# A no-show score counts as submitted here even though it is excluded
# from normalization.

from .categories import get_presenters_by_category
from .constants import REQUIRED_JUDGES, SESSION_TIMES
from .judges import clean_judge_name, judge_names_match, normalize_judge_name
from .records import PendingScore, PresenterScoreStatus


def required_judge_count(presenter):
    return REQUIRED_JUDGES.get(presenter.presentation_type, 2)


def _scores_by_presenter(scores):
    grouped = {}
    for score in scores:
        grouped.setdefault(score.presenter_id, []).append(score)
    return grouped


def _received_count(presenter, grouped):
    # Capped so extra scores never push a presenter past 100%
    return min(len(grouped.get(presenter.id, [])), required_judge_count(presenter))


def get_completion_percent(presenters, scores):
    """Received vs required judge scores over the given presenters, 0-100."""
    grouped = _scores_by_presenter(scores)
    total_required = 0
    total_received = 0
    for presenter in presenters:
        total_required += required_judge_count(presenter)
        total_received += _received_count(presenter, grouped)
    if total_required == 0:
        return 0
    return total_received / total_required * 100


def get_category_completion_percent(category, presenters, scores):
    return get_completion_percent(get_presenters_by_category(presenters, category), scores)


def is_category_complete(category, presenters, scores):
    """True once a non-empty category has every required score."""
    category_presenters = get_presenters_by_category(presenters, category)
    if not category_presenters:
        return False
    grouped = _scores_by_presenter(scores)
    return all(
        _received_count(p, grouped) >= required_judge_count(p)
        for p in category_presenters
    )


def get_presenter_status(presenter, scores):
    presenter_scores = [s for s in scores if s.presenter_id == presenter.id]

    judges_scored = []
    judges_missing = []
    no_show = False
    for name in presenter.assigned_judges:
        match = next((s for s in presenter_scores if judge_names_match(s.judge_name, name)), None)
        if match is None:
            judges_missing.append(name)
            continue
        judges_scored.append(name)
        if match.is_no_show:
            no_show = True

    if no_show:
        status = 'no-show'
    elif not judges_scored:
        status = 'pending'
    elif not judges_missing:
        status = 'complete'
    else:
        status = 'partial'

    return PresenterScoreStatus(
        presenter_id=presenter.id,
        status=status,
        judges_scored=judges_scored,
        judges_missing=judges_missing,
    )


def get_pending_scores(presenters, scores):
    """
    Every (presenter, assigned judge) pair still waiting for a score,
    ordered by session and then judge name.
    """
    scored = {(s.presenter_id, normalize_judge_name(s.judge_name)) for s in scores}

    pending = []
    for presenter in presenters:
        for name in presenter.assigned_judges:
            if (presenter.id, normalize_judge_name(name)) in scored:
                continue
            pending.append(PendingScore(
                presenter_id=presenter.id,
                presenter_name=presenter.full_name,
                judge_name=clean_judge_name(name),
                session_time=presenter.presentation_time,
                presentation_type=presenter.presentation_type,
            ))

    def session_order(item):
        if item.session_time in SESSION_TIMES:
            return SESSION_TIMES.index(item.session_time)
        return len(SESSION_TIMES)

    pending.sort(key=lambda item: (session_order(item), item.judge_name.lower()))
    return pending
