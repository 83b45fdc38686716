# scoring/categories.py
# Award categories and the ranked winners within each

import logging

from .constants import AWARD_CATEGORIES
from .final_scores import generate_all_final_scores
from .records import CategoryWinner

logger = logging.getLogger(__name__)


def matches_category(presenter, category):
    """
    Presentation type must match exactly. Research type and stage must
    match unless the category leaves them as None.
    """
    if presenter.presentation_type != category.presentation_type:
        return False
    if category.research_type is not None and presenter.research_type != category.research_type:
        return False
    if category.research_stage is not None and presenter.research_stage != category.research_stage:
        return False
    return True


def get_presenters_by_category(presenters, category):
    return [p for p in presenters if matches_category(p, category)]


def get_category_winners(category, final_scores):
    """
    Top `places` presenters of the category by descending final score.
    Presenters without a final score are never ranked. Ties keep the input
    order (sorted() is stable).
    """
    ranked = [
        fs for fs in final_scores
        if fs.final_score is not None and matches_category(fs.presenter, category)
    ]
    if not ranked:
        logger.debug('No complete final scores in category %s', category.id)
        return []

    ranked = sorted(ranked, key=lambda fs: fs.final_score, reverse=True)

    return [
        CategoryWinner(
            category_id=category.id,
            category=category.name,
            place=index + 1,
            presenter=fs.presenter,
            final_score=fs.final_score,
        )
        for index, fs in enumerate(ranked[:category.places])
    ]


def get_all_category_winners(presenters, scores, categories=AWARD_CATEGORIES):
    """Winners for every configured category, keyed by category id."""
    final_scores = generate_all_final_scores(presenters, scores)
    return {category.id: get_category_winners(category, final_scores) for category in categories}
