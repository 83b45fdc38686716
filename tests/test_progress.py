import pytest

from scoring import (
    get_category_completion_percent,
    get_completion_percent,
    get_pending_scores,
    get_presenter_status,
    is_category_complete,
    required_judge_count,
)
from scoring.constants import AWARD_CATEGORIES_BY_ID

ORAL_FOUND_ADV = AWARD_CATEGORIES_BY_ID['oral-found-adv']
UNDERGRAD_FOUND = AWARD_CATEGORIES_BY_ID['undergrad-found']


def undergrad(presenter_factory, **overrides):
    fields = dict(presentation_type='Undergrad Poster', research_stage=None, judge3='Judge C')
    fields.update(overrides)
    return presenter_factory(**fields)


def test_required_judge_count(presenter_factory):
    assert required_judge_count(presenter_factory(presentation_type='Oral')) == 2
    assert required_judge_count(presenter_factory(presentation_type='Poster')) == 2
    assert required_judge_count(undergrad(presenter_factory)) == 3


def test_category_completion_percent(presenter_factory, score_factory):
    presenters = [presenter_factory(id='P-1'), presenter_factory(id='P-2')]
    scores = [
        score_factory('P-1', 'Judge A'),
        score_factory('P-1', 'Judge B'),
        score_factory('P-2', 'Judge A'),
    ]
    assert get_category_completion_percent(ORAL_FOUND_ADV, presenters, scores) == pytest.approx(75.0)
    assert not is_category_complete(ORAL_FOUND_ADV, presenters, scores)

    scores.append(score_factory('P-2', 'Judge B'))
    assert get_category_completion_percent(ORAL_FOUND_ADV, presenters, scores) == pytest.approx(100.0)
    assert is_category_complete(ORAL_FOUND_ADV, presenters, scores)


def test_received_scores_are_capped(presenter_factory, score_factory):
    presenters = [presenter_factory(id='P-1'), presenter_factory(id='P-2')]
    scores = [
        score_factory('P-1', 'Judge A'),
        score_factory('P-1', 'Judge B'),
        score_factory('P-1', 'Judge Z'),
    ]
    assert get_completion_percent(presenters, scores) == pytest.approx(50.0)


def test_no_show_counts_as_received(presenter_factory, score_factory):
    presenters = [presenter_factory(id='P-1')]
    scores = [
        score_factory('P-1', 'Judge A'),
        score_factory('P-1', 'Judge B', None, is_no_show=True),
    ]
    assert get_completion_percent(presenters, scores) == pytest.approx(100.0)
    assert is_category_complete(ORAL_FOUND_ADV, presenters, scores)


def test_empty_category(presenter_factory):
    presenters = [presenter_factory(presentation_type='Poster')]
    assert get_category_completion_percent(ORAL_FOUND_ADV, presenters, []) == 0
    assert not is_category_complete(ORAL_FOUND_ADV, presenters, [])
    assert get_completion_percent([], []) == 0


def test_undergrad_needs_three(presenter_factory, score_factory):
    presenters = [undergrad(presenter_factory, id='UG-1')]
    scores = [score_factory('UG-1', 'Judge A'), score_factory('UG-1', 'Judge B')]
    assert get_category_completion_percent(UNDERGRAD_FOUND, presenters, scores) == pytest.approx(200 / 3)
    assert not is_category_complete(UNDERGRAD_FOUND, presenters, scores)


def test_presenter_status(presenter_factory, score_factory):
    presenter = presenter_factory(id='P-1')

    status = get_presenter_status(presenter, [])
    assert status.status == 'pending'
    assert status.judges_missing == ['Judge A', 'Judge B']

    status = get_presenter_status(presenter, [score_factory('P-1', 'judge a')])
    assert status.status == 'partial'
    assert status.judges_scored == ['Judge A']
    assert status.judges_missing == ['Judge B']

    status = get_presenter_status(presenter, [score_factory('P-1', 'Judge A'), score_factory('P-1', 'Judge B')])
    assert status.status == 'complete'
    assert status.judges_missing == []

    status = get_presenter_status(presenter, [score_factory('P-1', 'Judge A', None, is_no_show=True)])
    assert status.status == 'no-show'


def test_pending_scores_sorted_by_session_then_judge(presenter_factory, score_factory):
    presenters = [
        presenter_factory(id='P-1', presentation_time='1:45 - 3:45', judge1='Zed', judge2='Amy'),
        undergrad(presenter_factory, id='UG-1', presentation_time='10:15 - 11:15',
                  judge1='Bob', judge2='Cal', judge3='Dee'),
    ]
    scores = [score_factory('UG-1', 'cal'), score_factory('P-1', 'Zed')]

    pending = get_pending_scores(presenters, scores)

    assert [(p.presenter_id, p.judge_name) for p in pending] == [
        ('UG-1', 'Bob'),
        ('UG-1', 'Dee'),
        ('P-1', 'Amy'),
    ]
    assert pending[0].presenter_name == presenters[1].full_name
    assert pending[0].presentation_type == 'Undergrad Poster'
