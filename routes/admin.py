# routes/admin.py
# Admin endpoints: results, monitoring, audit and judge reassignment

from collections import defaultdict
from datetime import date

from flask import Blueprint, Response, abort, current_app, jsonify, request
from sqlalchemy.exc import IntegrityError

from extensions import db
from logic import build_results, export_results_csv, publish_all_winners, serialize
from models import Presenter, Score
from repository import SqlAlchemyRepository
from scoring import (
    AWARD_CATEGORIES,
    calculate_department_scores,
    detect_anomalies,
    generate_all_final_scores,
    get_category_completion_percent,
    get_completion_percent,
    get_pending_scores,
    get_presenter_status,
    get_weighted_breakdown,
    is_category_complete,
    required_judge_count,
)

admin_bp = Blueprint('admin', __name__, url_prefix='/admin')


def get_repository():
    return SqlAlchemyRepository()


# --- Results ---

@admin_bp.route('/results', methods=['GET'])
def results():
    repository = get_repository()
    return jsonify(build_results(repository.load_presenters(), repository.load_scores()))


@admin_bp.route('/results.csv', methods=['GET'])
def results_csv():
    repository = get_repository()
    content = export_results_csv(repository.load_presenters(), repository.load_scores())
    filename = f'research-day-results-{date.today().isoformat()}.csv'
    return Response(
        content,
        mimetype='text/csv',
        headers={'Content-Disposition': f'attachment; filename={filename}'},
    )


@admin_bp.route('/departments', methods=['GET'])
def departments():
    repository = get_repository()
    final_scores = generate_all_final_scores(repository.load_presenters(), repository.load_scores())
    department_scores = calculate_department_scores(final_scores)
    return jsonify({
        'departments': serialize(department_scores),
        'top_department': serialize(department_scores[0]) if department_scores else None,
    })


@admin_bp.route('/results/publish', methods=['POST'])
def publish_results():
    try:
        published = publish_all_winners(get_repository())
    except IntegrityError:
        db.session.rollback()
        return jsonify({'error': 'Winners conflict with stored data.'}), 409
    return jsonify({'success': True, 'published': published})


@admin_bp.route('/winners', methods=['GET'])
def winners():
    return jsonify({'winners': get_repository().load_winners()})


# --- Monitoring ---

@admin_bp.route('/progress', methods=['GET'])
def progress():
    repository = get_repository()
    presenters = repository.load_presenters()
    scores = repository.load_scores()

    categories = [
        {
            'id': category.id,
            'name': category.name,
            'completion_percent': get_category_completion_percent(category, presenters, scores),
            'is_complete': is_category_complete(category, presenters, scores),
        }
        for category in AWARD_CATEGORIES
    ]
    return jsonify({
        'overall_completion_percent': get_completion_percent(presenters, scores),
        'categories': categories,
        'presenters': [serialize(get_presenter_status(p, scores)) for p in presenters],
    })


@admin_bp.route('/pending', methods=['GET'])
def pending():
    repository = get_repository()
    presenters = repository.load_presenters()
    pending_scores = get_pending_scores(presenters, repository.load_scores())

    session_time = request.args.get('session')
    if session_time:
        pending_scores = [p for p in pending_scores if p.session_time == session_time]

    by_judge = defaultdict(list)
    for item in pending_scores:
        by_judge[item.judge_name].append(serialize(item))

    return jsonify({
        'total_pending': len(pending_scores),
        'total_expected': sum(required_judge_count(p) for p in presenters),
        'by_judge': by_judge,
        'pending': serialize(pending_scores),
    })


@admin_bp.route('/anomalies', methods=['GET'])
def anomalies():
    return jsonify({'anomalies': serialize(detect_anomalies(get_repository().load_scores()))})


# --- Scores and assignments ---

@admin_bp.route('/scores/<score_id>/breakdown', methods=['GET'])
def score_breakdown(score_id):
    score = db.get_or_404(Score, score_id).to_record()
    return jsonify({
        'score': serialize(score),
        'breakdown': serialize(get_weighted_breakdown(score.criteria)),
    })


@admin_bp.route('/scores/<score_id>', methods=['DELETE'])
def delete_score(score_id):
    if not get_repository().delete_score(score_id):
        abort(404, description=f'Score "{score_id}" not found.')
    current_app.logger.info(f'Score {score_id} deleted.')
    return jsonify({'success': True})


@admin_bp.route('/presenters/<presenter_id>/judges', methods=['POST'])
def reassign_judges(presenter_id):
    db.get_or_404(Presenter, presenter_id)

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'Expected a JSON object with judge1, judge2 and judge3.'}), 400

    slots = {}
    for slot in ('judge1', 'judge2', 'judge3'):
        value = data.get(slot)
        if value is not None and not isinstance(value, str):
            return jsonify({'error': f'{slot} must be a judge name or null.'}), 400
        slots[slot] = value

    try:
        presenter = get_repository().reassign_judges(presenter_id, **slots)
    except Exception:
        db.session.rollback()
        current_app.logger.exception('Failed to reassign judges')
        return jsonify({'error': 'Failed to reassign judges.'}), 500

    current_app.logger.info(
        f'Judges for {presenter_id} reassigned: {presenter.judge1}, {presenter.judge2}, {presenter.judge3}.'
    )
    return jsonify({'success': True, 'presenter': serialize(presenter)})


@admin_bp.route('/feedback/<feedback_id>', methods=['DELETE'])
def delete_feedback(feedback_id):
    if not get_repository().delete_feedback(feedback_id):
        abort(404, description=f'Feedback "{feedback_id}" not found.')
    current_app.logger.info(f'Feedback {feedback_id} deleted.')
    return jsonify({'success': True})
