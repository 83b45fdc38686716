# models/award_winner.py
# Published category winners. Computed results stay the source of truth,
# these rows are the snapshot announced at the ceremony.

from extensions import db
from sqlalchemy import CheckConstraint


class AwardWinner(db.Model):
    __tablename__ = 'award_winners'
    id = db.Column(db.Integer, primary_key=True)

    category_id = db.Column(db.String(40), nullable=False, index=True)
    presenter_id = db.Column(db.String(32), db.ForeignKey('presenters.id', ondelete='CASCADE'), nullable=False)
    place = db.Column(db.Integer, nullable=False)
    final_score = db.Column(db.Float, nullable=False)
    published_at = db.Column(db.DateTime, server_default=db.func.current_timestamp())

    presenter = db.relationship('Presenter')

    __table_args__ = (
        db.UniqueConstraint('category_id', 'place', name='unique_winner_in_category'),
        CheckConstraint('place BETWEEN 1 AND 3', name='check_winner_place'),
    )

    def to_dict(self):
        return {
            'category_id': self.category_id,
            'place': self.place,
            'presenter_id': self.presenter_id,
            'presenter_name': f'{self.presenter.first_name} {self.presenter.last_name}' if self.presenter else None,
            'final_score': self.final_score,
        }
