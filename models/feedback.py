# models/feedback.py
# Written feedback on a presentation; kept apart from scores

from extensions import db
from sqlalchemy import CheckConstraint

import scoring


class Feedback(db.Model):
    __tablename__ = 'feedback'
    id = db.Column(db.String(64), primary_key=True)
    presenter_id = db.Column(db.String(32), db.ForeignKey('presenters.id', ondelete='CASCADE'), nullable=False, index=True)
    # Copied at submission time for display
    presenter_name = db.Column(db.String(200), nullable=False, default='')
    submitter_type = db.Column(db.String(20), nullable=False, default='attendee')
    submitter_name = db.Column(db.String(100), nullable=False)
    strengths = db.Column(db.Text, nullable=True)
    areas_for_improvement = db.Column(db.Text, nullable=True)
    timestamp = db.Column(db.String(40), nullable=False)

    __table_args__ = (
        CheckConstraint("submitter_type IN ('judge', 'attendee')", name='check_submitter_type'),
    )

    def to_record(self):
        return scoring.Feedback(
            id=self.id,
            presenter_id=self.presenter_id,
            presenter_name=self.presenter_name or '',
            submitter_type=self.submitter_type,
            submitter_name=self.submitter_name,
            strengths=self.strengths or '',
            areas_for_improvement=self.areas_for_improvement or '',
            timestamp=self.timestamp,
        )
