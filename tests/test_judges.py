from scoring import build_judge_roster, get_judge_assignments, judge_id_from_name, normalize_judge_name
from scoring.judges import clean_judge_name, judge_names_match, make_score_id


def test_judge_name_rules():
    assert normalize_judge_name('  Steve DOW ') == 'steve dow'
    assert judge_id_from_name('Steve   Dow') == 'steve-dow'
    assert judge_names_match('Steve Dow', ' steve dow')
    assert not judge_names_match('Steve Dow', None)
    assert not judge_names_match('', '')
    assert make_score_id('1A-1', 'steve-dow') == '1A-1-steve-dow'


def test_roster_collects_assignments(presenter_factory):
    presenters = [
        presenter_factory(id='P-1', judge1='Zed Judge', judge2='Amy Judge'),
        presenter_factory(id='P-2', judge1='amy judge', judge2='', judge3=None),
    ]

    roster = build_judge_roster(presenters)

    assert [j.id for j in roster] == ['amy-judge', 'zed-judge']
    assert roster[0].name == 'Amy Judge'
    assert roster[0].assigned_presenters == ['P-1', 'P-2']
    assert roster[1].assigned_presenters == ['P-1']


def test_judge_assignments(presenter_factory, score_factory):
    presenters = [
        presenter_factory(id='P-1'),
        presenter_factory(id='P-2', judge1='Judge C'),
        presenter_factory(id='P-3'),
    ]
    scored = score_factory('P-1', 'Judge A')

    assignments = get_judge_assignments('judge-a', presenters, [scored])

    assert [(p.id, s) for p, s in assignments] == [('P-1', scored), ('P-3', None)]


def test_inner_whitespace_is_collapsed():
    assert clean_judge_name('  Jane   Doe ') == 'Jane Doe'
    assert clean_judge_name(None) == ''
    assert normalize_judge_name('Jane  Doe') == normalize_judge_name('jane doe')
    assert judge_names_match('Jane  Doe', 'Jane Doe')


def test_double_spaced_score_counts_for_its_slot(presenter_factory, score_factory):
    presenter = presenter_factory(id='P-1', judge1='Jane Doe', judge2='Judge B')
    score = score_factory('P-1', 'Jane  Doe')

    assert score.judge_name == 'Jane Doe'
    assert get_judge_assignments(judge_id_from_name('Jane Doe'), [presenter], [score]) == [(presenter, score)]
