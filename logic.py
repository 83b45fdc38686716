# logic.py
# Glue between storage and the scoring core: load a snapshot, compute,
# publish. Routes call these, never the core directly on ORM rows.

import csv
import io
from dataclasses import asdict

from flask import current_app

from scoring import (
    AWARD_CATEGORIES,
    calculate_department_scores,
    generate_all_final_scores,
    get_all_category_winners,
    get_category_completion_percent,
    get_completion_percent,
    is_category_complete,
    matches_category,
)

PLACE_LABELS = {1: '1st', 2: '2nd', 3: '3rd'}


def serialize(records):
    if isinstance(records, (list, tuple)):
        return [asdict(r) for r in records]
    return asdict(records) if records is not None else None


def build_results(presenters, scores):
    """
    Everything the results page needs, computed from one snapshot:
    per-category winners and completion, department ranking, overall progress.
    """
    all_winners = get_all_category_winners(presenters, scores)
    department_scores = calculate_department_scores(generate_all_final_scores(presenters, scores))

    categories = []
    for category in AWARD_CATEGORIES:
        categories.append({
            'category': asdict(category),
            'completion_percent': get_category_completion_percent(category, presenters, scores),
            'is_complete': is_category_complete(category, presenters, scores),
            'winners': serialize(all_winners[category.id]),
        })

    return {
        'categories': categories,
        'department_scores': serialize(department_scores),
        'top_department': serialize(department_scores[0]) if department_scores else None,
        'overall_completion_percent': get_completion_percent(presenters, scores),
    }


def check_and_publish_category_winners(repository, presenter_id):
    """
    Checks every category the presenter belongs to. A category whose scores
    are all in gets its winners stored. Returns the ids of the categories
    that were published.
    """
    presenter = repository.get_presenter(presenter_id)
    if presenter is None:
        return []

    presenters = repository.load_presenters()
    scores = repository.load_scores()

    published = []
    all_winners = None
    for category in AWARD_CATEGORIES:
        if not matches_category(presenter, category):
            continue
        if not is_category_complete(category, presenters, scores):
            continue
        if all_winners is None:
            all_winners = get_all_category_winners(presenters, scores)
        repository.save_category_winners(category.id, all_winners[category.id])
        current_app.logger.info(f"Category '{category.name}' is fully scored, winners published.")
        published.append(category.id)

    return published


def publish_all_winners(repository):
    """Stores the current standings of every category, complete or not."""
    all_winners = get_all_category_winners(repository.load_presenters(), repository.load_scores())
    for category_id, winners in all_winners.items():
        repository.save_category_winners(category_id, winners)
    published = sum(len(w) for w in all_winners.values())
    current_app.logger.info(f'Published {published} winners across {len(all_winners)} categories.')
    return published


def export_results_csv(presenters, scores):
    all_winners = get_all_category_winners(presenters, scores)
    department_scores = calculate_department_scores(generate_all_final_scores(presenters, scores))

    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator='\n')
    writer.writerow(['Category', 'Place', 'Presenter ID', 'Presenter Name', 'Final Score'])

    for category in AWARD_CATEGORIES:
        winners = all_winners[category.id]
        if not winners:
            writer.writerow([category.name, 'No winners yet', '', '', ''])
            continue
        for winner in winners:
            writer.writerow([
                category.name,
                PLACE_LABELS[winner.place],
                winner.presenter.id,
                winner.presenter.full_name,
                f'{winner.final_score:.4f}',
            ])

    writer.writerow([])
    writer.writerow(['Golden Pipette Award'])
    if department_scores:
        top = department_scores[0]
        writer.writerow([top.department, '', '', f'{top.presenter_count} presenters', f'{top.average_score:.4f}'])

    return output.getvalue()
