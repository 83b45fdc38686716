# routes/main.py
# Judge-facing endpoints: assignments, score submission and feedback

import uuid
from datetime import datetime, timezone

from flask import Blueprint, abort, current_app, jsonify, request
from sqlalchemy.exc import IntegrityError

from extensions import db
from logic import check_and_publish_category_winners, serialize
from repository import SqlAlchemyRepository
from scoring import Feedback, ScoreCriteria, build_judge_roster, build_score, get_judge_assignments
from scoring.judges import clean_judge_name
from scoring.constants import CRITERIA, MAX_RATING, MIN_RATING, SUBMITTER_TYPES

main_bp = Blueprint('main', __name__)

CRITERIA_FIELDS = [field for field, _, _ in CRITERIA]


def get_repository():
    return SqlAlchemyRepository()


def parse_score_payload(data, repository):
    """
    Validates a submitted score and builds the scoring.Score for it.
    Raises ValueError with a message fit for the judge.
    """
    if not isinstance(data, dict):
        raise ValueError('Expected a JSON object.')

    presenter_id = data.get('presenter_id')
    judge_name = clean_judge_name(data.get('judge_name'))
    if not presenter_id or not judge_name:
        raise ValueError('presenter_id and judge_name are required.')
    if repository.get_presenter(presenter_id) is None:
        raise ValueError(f'Unknown presenter "{presenter_id}".')

    is_no_show = bool(data.get('is_no_show', False))
    timestamp = datetime.now(timezone.utc).isoformat()

    # A no-show needs no ratings; they are stored as zeros
    if is_no_show:
        return build_score(presenter_id, judge_name, is_no_show=True, timestamp=timestamp)

    raw = data.get('criteria')
    if not isinstance(raw, dict):
        raise ValueError('criteria must be an object with all seven ratings.')

    ratings = {}
    for field in CRITERIA_FIELDS:
        value = raw.get(field)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f'A rating is required for "{field}".')
        if not MIN_RATING <= value <= MAX_RATING:
            raise ValueError(f'Rating for "{field}" must be between {MIN_RATING} and {MAX_RATING}.')
        ratings[field] = value

    return build_score(presenter_id, judge_name, ScoreCriteria(**ratings), timestamp=timestamp)


@main_bp.route('/judges', methods=['GET'])
def list_judges():
    roster = build_judge_roster(get_repository().load_presenters())
    return jsonify({'judges': serialize(roster)})


@main_bp.route('/judges/<judge_id>/assignments', methods=['GET'])
def judge_assignments(judge_id):
    repository = get_repository()
    presenters = repository.load_presenters()

    judge = next((j for j in build_judge_roster(presenters) if j.id == judge_id), None)
    if judge is None:
        abort(404, description=f'No presenters are assigned to judge "{judge_id}".')

    assignments = [
        {
            'presenter': serialize(presenter),
            'score': serialize(score),
            'is_scored': score is not None,
        }
        for presenter, score in get_judge_assignments(judge_id, presenters, repository.load_scores())
    ]
    return jsonify({'judge': serialize(judge), 'assignments': assignments})


@main_bp.route('/scores', methods=['GET'])
def list_scores():
    return jsonify({'scores': serialize(get_repository().load_scores())})


@main_bp.route('/scores', methods=['POST'])
def submit_score():
    repository = get_repository()
    try:
        record = parse_score_payload(request.get_json(silent=True), repository)
        saved = repository.save_score(record)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except IntegrityError:
        db.session.rollback()
        return jsonify({'error': 'Score conflicts with stored data.'}), 409
    except Exception:
        db.session.rollback()
        current_app.logger.exception('Failed to save score')
        return jsonify({'error': 'Failed to save score.'}), 500

    current_app.logger.info(f'Score {saved.id} saved by {saved.judge_name} (total {saved.weighted_total}).')

    published = []
    if current_app.config.get('AUTO_PUBLISH_WINNERS'):
        # The score is already committed at this point
        try:
            published = check_and_publish_category_winners(repository, saved.presenter_id)
        except IntegrityError:
            db.session.rollback()
            current_app.logger.exception(f'Winners for {saved.presenter_id} conflict with stored data')
            return jsonify({'error': 'Score saved, but winners conflict with stored data.'}), 409
        except Exception:
            db.session.rollback()
            current_app.logger.exception(f'Failed to publish winners after score {saved.id}')
            return jsonify({'error': 'Score saved, but publishing winners failed.'}), 500

    return jsonify({'success': True, 'score': serialize(saved), 'published_categories': published})


def parse_feedback_payload(data, repository):
    """Validates submitted feedback and builds the scoring.Feedback for it."""
    if not isinstance(data, dict):
        raise ValueError('Expected a JSON object.')

    presenter_id = data.get('presenter_id')
    submitter_name = (data.get('submitter_name') or '').strip()
    if not presenter_id or not submitter_name:
        raise ValueError('presenter_id and submitter_name are required.')

    presenter = repository.get_presenter(presenter_id)
    if presenter is None:
        raise ValueError(f'Unknown presenter "{presenter_id}".')

    submitter_type = data.get('submitter_type') or 'attendee'
    if submitter_type not in SUBMITTER_TYPES:
        raise ValueError(f'submitter_type must be one of: {", ".join(SUBMITTER_TYPES)}.')

    strengths = data.get('strengths') or ''
    areas_for_improvement = data.get('areas_for_improvement') or ''
    if not isinstance(strengths, str) or not isinstance(areas_for_improvement, str):
        raise ValueError('strengths and areas_for_improvement must be text.')

    return Feedback(
        id=uuid.uuid4().hex,
        presenter_id=presenter_id,
        presenter_name=presenter.full_name,
        submitter_type=submitter_type,
        submitter_name=submitter_name,
        strengths=strengths.strip(),
        areas_for_improvement=areas_for_improvement.strip(),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@main_bp.route('/feedback', methods=['GET'])
def list_feedback():
    presenter_id = request.args.get('presenter_id') or None
    return jsonify({'feedback': serialize(get_repository().load_feedback(presenter_id))})


@main_bp.route('/feedback', methods=['POST'])
def submit_feedback():
    repository = get_repository()
    try:
        record = parse_feedback_payload(request.get_json(silent=True), repository)
        saved = repository.save_feedback(record)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception:
        db.session.rollback()
        current_app.logger.exception('Failed to save feedback')
        return jsonify({'error': 'Failed to save feedback.'}), 500

    current_app.logger.info(f'Feedback {saved.id} on {saved.presenter_id} from {saved.submitter_type} {saved.submitter_name}.')
    return jsonify({'success': True, 'feedback': serialize(saved)})
