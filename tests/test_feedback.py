import pytest

from extensions import db
from models import Feedback


@pytest.fixture
def oral(store_presenter, presenter_factory):
    return store_presenter(presenter_factory(id='1A-1', first_name='Owen', last_name='Bevis'))


def post_feedback(client, **fields):
    payload = {'presenter_id': '1A-1', 'submitter_name': 'Sam Visitor'}
    payload.update(fields)
    return client.post('/feedback', json=payload)


def test_submit_feedback(client, oral):
    response = post_feedback(client, strengths=' Great hook ', areas_for_improvement='Slow down')

    assert response.status_code == 200
    feedback = response.get_json()['feedback']
    assert feedback['presenter_name'] == 'Owen Bevis'
    assert feedback['submitter_type'] == 'attendee'
    assert feedback['strengths'] == 'Great hook'
    assert feedback['areas_for_improvement'] == 'Slow down'
    assert feedback['timestamp']
    assert db.session.query(Feedback).count() == 1


@pytest.mark.parametrize('payload, message', [
    (None, 'Expected a JSON object'),
    ({'submitter_name': 'Sam Visitor'}, 'required'),
    ({'presenter_id': '1A-1'}, 'required'),
    ({'presenter_id': '1A-1', 'submitter_name': '   '}, 'required'),
    ({'presenter_id': 'nope', 'submitter_name': 'Sam Visitor'}, 'Unknown presenter'),
    ({'presenter_id': '1A-1', 'submitter_name': 'Sam Visitor', 'submitter_type': 'parent'}, 'submitter_type'),
    ({'presenter_id': '1A-1', 'submitter_name': 'Sam Visitor', 'strengths': 5}, 'text'),
])
def test_invalid_feedback_rejected(client, oral, payload, message):
    response = client.post('/feedback', json=payload)

    assert response.status_code == 400
    assert message in response.get_json()['error']
    assert db.session.query(Feedback).count() == 0


def test_list_feedback_by_presenter(client, oral, store_presenter, presenter_factory):
    store_presenter(presenter_factory(id='1A-2'))
    post_feedback(client, submitter_type='judge', submitter_name='Judge A')
    post_feedback(client, presenter_id='1A-2')

    everything = client.get('/feedback').get_json()['feedback']
    assert sorted(f['presenter_id'] for f in everything) == ['1A-1', '1A-2']

    only_one = client.get('/feedback?presenter_id=1A-1').get_json()['feedback']
    assert [(f['submitter_type'], f['submitter_name']) for f in only_one] == [('judge', 'Judge A')]


def test_feedback_does_not_touch_scores(client, oral):
    post_feedback(client)

    assert client.get('/scores').get_json()['scores'] == []
    assert client.get('/admin/progress').get_json()['overall_completion_percent'] == 0


def test_delete_feedback(client, oral):
    feedback_id = post_feedback(client).get_json()['feedback']['id']

    assert client.delete(f'/admin/feedback/{feedback_id}').status_code == 200
    response = client.delete(f'/admin/feedback/{feedback_id}')
    assert response.status_code == 404
    assert 'not found' in response.get_json()['error']
    assert client.get('/feedback').get_json()['feedback'] == []
