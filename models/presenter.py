# models/presenter.py

from extensions import db
from sqlalchemy import CheckConstraint

import scoring


class Presenter(db.Model):
    __tablename__ = 'presenters'
    # Presentation id from the schedule, e.g. "1B-3"
    id = db.Column(db.String(32), primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(200), nullable=False, default='')
    classification = db.Column(db.String(100), nullable=False, default='')
    research_stage = db.Column(db.String(20), nullable=True)
    research_type = db.Column(db.String(100), nullable=False)
    department = db.Column(db.String(200), nullable=False)
    presentation_type = db.Column(db.String(30), nullable=False)
    presentation_time = db.Column(db.String(30), nullable=True)
    title = db.Column(db.String, nullable=False, default='')

    # Judge names as assigned; judge3 only for undergrad posters
    judge1 = db.Column(db.String(100), nullable=True)
    judge2 = db.Column(db.String(100), nullable=True)
    judge3 = db.Column(db.String(100), nullable=True)

    scores = db.relationship('Score', backref='presenter', lazy=True, cascade='all, delete-orphan')
    feedback = db.relationship('Feedback', backref='presenter', lazy=True, cascade='all, delete-orphan')

    __table_args__ = (
        CheckConstraint(
            "presentation_type IN ('Oral', 'Poster', 'Undergrad Poster')",
            name='check_presentation_type',
        ),
        CheckConstraint(
            "research_stage IN ('Early', 'Advanced') OR research_stage IS NULL",
            name='check_research_stage',
        ),
    )

    def to_record(self):
        return scoring.Presenter(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            classification=self.classification or '',
            research_stage=self.research_stage,
            research_type=self.research_type,
            department=self.department,
            presentation_type=self.presentation_type,
            judge1=self.judge1,
            judge2=self.judge2,
            judge3=self.judge3,
            email=self.email or '',
            title=self.title or '',
            presentation_time=self.presentation_time,
        )
