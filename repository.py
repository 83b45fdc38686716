# repository.py
# Persistence boundary for the scoring core. The core only ever sees the
# snapshots returned here; every write goes back through here as well.

from abc import ABC, abstractmethod

from extensions import db
from models import AwardWinner, Feedback, Presenter, Score
from scoring.judges import clean_judge_name


class ScoringRepository(ABC):
    """What the scoring service needs from storage."""

    @abstractmethod
    def load_presenters(self):
        """All presenters as scoring.Presenter records."""

    @abstractmethod
    def get_presenter(self, presenter_id):
        """One scoring.Presenter, or None."""

    @abstractmethod
    def load_scores(self):
        """All submitted scores as scoring.Score records."""

    @abstractmethod
    def save_score(self, score):
        """Insert or overwrite the score for its (presenter, judge) pair."""

    @abstractmethod
    def delete_score(self, score_id):
        """Returns False when there was nothing to delete."""

    @abstractmethod
    def reassign_judges(self, presenter_id, judge1, judge2, judge3):
        """Replaces the presenter's judge slots and returns the new record."""

    @abstractmethod
    def save_category_winners(self, category_id, winners):
        """Replaces the published winners of one category."""

    @abstractmethod
    def load_winners(self):
        """Published winners as dicts, ordered by category and place."""

    @abstractmethod
    def save_feedback(self, feedback):
        """Stores one scoring.Feedback and returns it as stored."""

    @abstractmethod
    def load_feedback(self, presenter_id=None):
        """Feedback records, newest first, optionally for one presenter."""

    @abstractmethod
    def delete_feedback(self, feedback_id):
        """Returns False when there was nothing to delete."""


class SqlAlchemyRepository(ScoringRepository):

    def __init__(self, session=None):
        self.session = session or db.session

    def load_presenters(self):
        rows = self.session.query(Presenter).order_by(Presenter.id).all()
        return [row.to_record() for row in rows]

    def get_presenter(self, presenter_id):
        row = self.session.get(Presenter, presenter_id)
        return row.to_record() if row else None

    def load_scores(self):
        # Stable order so that results are identical between calls
        rows = self.session.query(Score).order_by(Score.presenter_id, Score.judge_id).all()
        return [row.to_record() for row in rows]

    def save_score(self, score):
        # Last write wins for the same presenter-judge pair
        existing = self.session.query(Score).filter_by(
            presenter_id=score.presenter_id,
            judge_id=score.judge_id,
        ).first()
        if existing is None:
            existing = Score()
            self.session.add(existing)
        existing.update_from_record(score)
        self.session.commit()
        return existing.to_record()

    def delete_score(self, score_id):
        row = self.session.get(Score, score_id)
        if row is None:
            return False
        self.session.delete(row)
        self.session.commit()
        return True

    def reassign_judges(self, presenter_id, judge1, judge2, judge3):
        row = self.session.get(Presenter, presenter_id)
        if row is None:
            return None
        row.judge1 = _blank_to_none(judge1)
        row.judge2 = _blank_to_none(judge2)
        row.judge3 = _blank_to_none(judge3)
        self.session.commit()
        return row.to_record()

    def save_category_winners(self, category_id, winners):
        self.session.query(AwardWinner).filter_by(category_id=category_id).delete(synchronize_session=False)
        for winner in winners:
            self.session.add(AwardWinner(
                category_id=category_id,
                presenter_id=winner.presenter.id,
                place=winner.place,
                final_score=winner.final_score,
            ))
        self.session.commit()

    def load_winners(self):
        rows = self.session.query(AwardWinner).order_by(AwardWinner.category_id, AwardWinner.place).all()
        return [row.to_dict() for row in rows]

    def save_feedback(self, feedback):
        row = Feedback(
            id=feedback.id,
            presenter_id=feedback.presenter_id,
            presenter_name=feedback.presenter_name,
            submitter_type=feedback.submitter_type,
            submitter_name=feedback.submitter_name,
            strengths=feedback.strengths or None,
            areas_for_improvement=feedback.areas_for_improvement or None,
            timestamp=feedback.timestamp,
        )
        self.session.add(row)
        self.session.commit()
        return row.to_record()

    def load_feedback(self, presenter_id=None):
        query = self.session.query(Feedback)
        if presenter_id is not None:
            query = query.filter_by(presenter_id=presenter_id)
        rows = query.order_by(Feedback.timestamp.desc(), Feedback.id).all()
        return [row.to_record() for row in rows]

    def delete_feedback(self, feedback_id):
        row = self.session.get(Feedback, feedback_id)
        if row is None:
            return False
        self.session.delete(row)
        self.session.commit()
        return True


def _blank_to_none(name):
    if name is None:
        return None
    name = clean_judge_name(name)
    return name or None
