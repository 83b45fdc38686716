import pytest

from app import create_app
from config import TestConfig
from extensions import db
from models import Presenter as PresenterRow
from scoring import Presenter, ScoreCriteria, build_score


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def presenter_factory():
    counter = {'n': 0}

    def make(**overrides):
        counter['n'] += 1
        fields = dict(
            id=f'P-{counter["n"]}',
            first_name='Ada',
            last_name=f'Presenter{counter["n"]}',
            classification='PhD Student',
            research_stage='Advanced',
            research_type='Foundational Research',
            department='Biomedical Sciences',
            presentation_type='Oral',
            judge1='Judge A',
            judge2='Judge B',
            judge3=None,
        )
        fields.update(overrides)
        return Presenter(**fields)

    return make


@pytest.fixture
def score_factory():
    def make(presenter_id, judge_name, ratings=(3, 3, 3, 3, 3, 3, 3), is_no_show=False):
        criteria = None if ratings is None else ScoreCriteria(*ratings)
        return build_score(presenter_id, judge_name, criteria, is_no_show=is_no_show)

    return make


@pytest.fixture
def store_presenter(app):
    """Writes a scoring.Presenter to the database."""
    def store(record):
        db.session.add(PresenterRow(
            id=record.id,
            first_name=record.first_name,
            last_name=record.last_name,
            classification=record.classification,
            research_stage=record.research_stage,
            research_type=record.research_type,
            department=record.department,
            presentation_type=record.presentation_type,
            presentation_time=record.presentation_time,
            judge1=record.judge1,
            judge2=record.judge2,
            judge3=record.judge3,
        ))
        db.session.commit()
        return record

    return store
