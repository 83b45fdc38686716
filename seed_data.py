# seed_data.py
# `flask seed`: fills the database with a small demo research day

import click
from flask.cli import with_appcontext

from extensions import db
from models import AwardWinner, Feedback, Presenter, Score
from scoring import ScoreCriteria, build_score

DEMO_PRESENTERS = [
    # id, first, last, classification, stage, type, department, presentation, time, judges
    ('1A-1', 'Owen', 'Bevis', 'PhD Student', 'Advanced', 'Foundational Research',
     'Biomedical Sciences', 'Oral', '11:30 - 1:30', ('Susan Bailey', 'Tom LaRocca', None)),
    ('1A-2', 'Vanessa', 'Correa', 'PhD Student', 'Advanced', 'Foundational Research',
     'Biomedical Sciences', 'Oral', '11:30 - 1:30', ('Susan Bailey', 'Steve Dow', None)),
    ('1A-3', 'Taylor', 'Crisologo', 'DVM Student', 'Early', 'Veterinary Clinical Research',
     'Clinical Sciences', 'Oral', '1:45 - 3:45', ('Kristin Zersen', 'Steve Dow', None)),
    ('2P-1', 'Kelly', 'Greenhut', 'DVM Student', 'Early', 'Translational Research',
     'Microbiology, Immunology, and Pathology', 'Poster', '1:45 - 3:45', ('Tom LaRocca', 'Kristin Zersen', None)),
    ('2P-2', 'Emma', 'Mangold', 'Research Coordinator', 'Advanced', 'Translational Research',
     'Other', 'Poster', '1:45 - 3:45', ('Tom LaRocca', 'Jenny Sones', None)),
    ('UG-1', 'Sophie', 'Downing', 'Undergraduate', None, 'Foundational Research',
     'Clinical Sciences', 'Undergrad Poster', '10:15 - 11:15', ('Jenny Sones', 'Steve Dow', 'Susan Bailey')),
]

# presenter id, judge name, ratings in rubric order (None = no-show)
DEMO_SCORES = [
    ('1A-1', 'Susan Bailey', (5, 4, 4, 5, 4, 5, 4)),
    ('1A-1', 'Tom LaRocca', (4, 4, 3, 4, 4, 4, 3)),
    ('1A-2', 'Susan Bailey', (3, 4, 3, 3, 4, 3, 4)),
    ('1A-2', 'Steve Dow', (5, 5, 4, 4, 5, 5, 5)),
    ('1A-3', 'Kristin Zersen', (4, 3, 3, 4, 4, 3, 4)),
    ('2P-1', 'Tom LaRocca', (3, 3, 2, 3, 3, 3, 3)),
    ('2P-1', 'Kristin Zersen', (4, 4, 4, 4, 4, 4, 4)),
    ('2P-2', 'Tom LaRocca', (4, 5, 4, 4, 4, 5, 4)),
    ('2P-2', 'Jenny Sones', None),
    ('UG-1', 'Jenny Sones', (4, 4, 3, 4, 3, 4, 4)),
    ('UG-1', 'Steve Dow', (4, 5, 4, 4, 4, 4, 5)),
]


def seed_demo_data(with_scores=True):
    """Replaces all presenters, scores, winners and feedback with the demo set."""
    # Children first
    db.session.query(Feedback).delete()
    db.session.query(AwardWinner).delete()
    db.session.query(Score).delete()
    db.session.query(Presenter).delete()
    db.session.commit()

    for (presenter_id, first, last, classification, stage, research_type,
         department, presentation_type, session_time, judges) in DEMO_PRESENTERS:
        db.session.add(Presenter(
            id=presenter_id,
            first_name=first,
            last_name=last,
            email=f'{first.lower()}.{last.lower()}@example.edu',
            classification=classification,
            research_stage=stage,
            research_type=research_type,
            department=department,
            presentation_type=presentation_type,
            presentation_time=session_time,
            title=f'Research by {first} {last}',
            judge1=judges[0],
            judge2=judges[1],
            judge3=judges[2],
        ))
    db.session.commit()

    score_count = 0
    if with_scores:
        for presenter_id, judge_name, ratings in DEMO_SCORES:
            if ratings is None:
                record = build_score(presenter_id, judge_name, is_no_show=True)
            else:
                record = build_score(presenter_id, judge_name, ScoreCriteria(*ratings))
            row = Score()
            row.update_from_record(record)
            db.session.add(row)
            score_count += 1
        db.session.commit()

    return len(DEMO_PRESENTERS), score_count


@click.command('seed')
@click.option('--with-scores/--no-scores', default=True, help='Also load demo judge scores.')
@with_appcontext
def seed_command(with_scores):
    """Load a demo research day into the database."""
    db.create_all()
    click.echo('Loading demo data...')
    try:
        presenters, scores = seed_demo_data(with_scores)
    except Exception as e:
        db.session.rollback()
        raise click.ClickException(f'Failed to load demo data: {e}')
    click.echo(f'Loaded {presenters} presenters and {scores} scores.')
