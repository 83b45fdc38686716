# scoring/judges.py
# Judge identity rules. Assignments are name-based, so every comparison
# between a presenter's judge slot and a score goes through here.

from .records import Judge

def clean_judge_name(name):
    """Trimmed, with inner whitespace runs collapsed to one space."""
    return ' '.join((name or '').split())


def normalize_judge_name(name):
    """Lowercased, cleaned form used for matching names."""
    return clean_judge_name(name).lower()


def judge_names_match(a, b):
    if not a or not b:
        return False
    return normalize_judge_name(a) == normalize_judge_name(b)


def judge_id_from_name(name):
    """'Dr. Jane  Doe ' -> 'dr.-jane-doe'"""
    return normalize_judge_name(name).replace(' ', '-')


def make_score_id(presenter_id, judge_id):
    # One score per (presenter, judge): resubmission reuses the id
    return f'{presenter_id}-{judge_id}'


def build_judge_roster(presenters):
    """
    Distinct judges found in the presenters' judge slots, each with the ids
    of the presenters assigned to them. Sorted by name.
    """
    roster = {}
    for presenter in presenters:
        for name in presenter.assigned_judges:
            judge_id = judge_id_from_name(name)
            if judge_id not in roster:
                roster[judge_id] = Judge(id=judge_id, name=clean_judge_name(name), assigned_presenters=[])
            roster[judge_id].assigned_presenters.append(presenter.id)
    return sorted(roster.values(), key=lambda j: j.name.lower())


def get_judge_assignments(judge_id, presenters, scores):
    """
    Presenters assigned to one judge, each paired with that judge's score
    for them (None if not yet scored).
    """
    by_pair = {(s.presenter_id, s.judge_id): s for s in scores}
    assignments = []
    for presenter in presenters:
        if any(judge_id_from_name(name) == judge_id for name in presenter.assigned_judges):
            assignments.append((presenter, by_pair.get((presenter.id, judge_id))))
    return assignments
