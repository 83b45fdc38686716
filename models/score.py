# models/score.py

from extensions import db
from sqlalchemy import CheckConstraint

import scoring


class Score(db.Model):
    __tablename__ = 'scores'
    # "<presenter_id>-<judge_id>", so a resubmission hits the same row
    id = db.Column(db.String(160), primary_key=True)
    presenter_id = db.Column(db.String(32), db.ForeignKey('presenters.id', ondelete='CASCADE'), nullable=False)
    judge_name = db.Column(db.String(100), nullable=False)
    judge_id = db.Column(db.String(120), nullable=False, index=True)
    timestamp = db.Column(db.String(40), nullable=True)

    content_why = db.Column(db.Integer, nullable=False, default=0)
    content_what_how = db.Column(db.Integer, nullable=False, default=0)
    content_next_steps = db.Column(db.Integer, nullable=False, default=0)
    presentation_flow = db.Column(db.Integer, nullable=False, default=0)
    preparedness = db.Column(db.Integer, nullable=False, default=0)
    verbal_comm = db.Column(db.Integer, nullable=False, default=0)
    visual_aids = db.Column(db.Integer, nullable=False, default=0)

    weighted_total = db.Column(db.Float, nullable=False, default=0)
    is_no_show = db.Column(db.Boolean, nullable=False, default=False)

    __table_args__ = (
        db.UniqueConstraint('presenter_id', 'judge_id', name='unique_presenter_judge'),
        CheckConstraint('weighted_total >= 0', name='check_weighted_total'),
    )

    def to_record(self):
        return scoring.Score(
            id=self.id,
            presenter_id=self.presenter_id,
            judge_name=self.judge_name,
            judge_id=self.judge_id,
            criteria=scoring.ScoreCriteria(
                content_why=self.content_why,
                content_what_how=self.content_what_how,
                content_next_steps=self.content_next_steps,
                presentation_flow=self.presentation_flow,
                preparedness=self.preparedness,
                verbal_comm=self.verbal_comm,
                visual_aids=self.visual_aids,
            ),
            weighted_total=self.weighted_total,
            is_no_show=self.is_no_show,
            timestamp=self.timestamp,
        )

    def update_from_record(self, record):
        """Overwrites every column with the values of a scoring.Score."""
        self.id = record.id
        self.presenter_id = record.presenter_id
        self.judge_name = record.judge_name
        self.judge_id = record.judge_id
        self.timestamp = record.timestamp
        criteria = record.criteria
        self.content_why = criteria.content_why
        self.content_what_how = criteria.content_what_how
        self.content_next_steps = criteria.content_next_steps
        self.presentation_flow = criteria.presentation_flow
        self.preparedness = criteria.preparedness
        self.verbal_comm = criteria.verbal_comm
        self.visual_aids = criteria.visual_aids
        self.weighted_total = record.weighted_total
        self.is_no_show = record.is_no_show
