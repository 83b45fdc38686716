# scoring/constants.py
# Static configuration for the research day: rubric weights, award categories

from .records import AwardCategory

RESEARCH_TYPES = (
    'Foundational Research',
    'Translational Research',
    'Veterinary Clinical Research',
    'Social Sciences/Pedagogy Research',
)

RESEARCH_STAGES = ('Early', 'Advanced')

ORAL = 'Oral'
POSTER = 'Poster'
UNDERGRAD_POSTER = 'Undergrad Poster'
PRESENTATION_TYPES = (ORAL, POSTER, UNDERGRAD_POSTER)

OTHER_DEPARTMENT = 'Other'
DEPARTMENTS = (
    'Clinical Sciences',
    'Microbiology, Immunology, and Pathology',
    'Environmental & Radiological Health Sciences',
    'Biomedical Sciences',
    OTHER_DEPARTMENT,
)

# Who may leave written feedback
SUBMITTER_TYPES = ('judge', 'attendee')

SESSION_TIMES = (
    '10:15 - 11:15',  # undergrad posters
    '11:30 - 1:30',
    '1:45 - 3:45',
)

# (field, label, weight) in rubric order
CRITERIA = (
    ('content_why', 'Content - WHY (hypothesis/problem)', 4),
    ('content_what_how', 'Content - WHAT/HOW (methods/results)', 5),
    ('content_next_steps', 'Content - Next Steps', 2),
    ('presentation_flow', 'Presentation - Logical Flow', 3),
    ('preparedness', 'Presentation - Preparedness', 2),
    ('verbal_comm', 'Presentation - Verbal Communication', 2),
    ('visual_aids', 'Presentation - Visual Aids', 2),
)

CRITERIA_WEIGHTS = {field: weight for field, _, weight in CRITERIA}

MIN_RATING = 1
MAX_RATING = 5
MAX_WEIGHTED_SCORE = sum(CRITERIA_WEIGHTS.values()) * MAX_RATING  # 100

# Final score coefficients. 33.33 * 3 == 99.99, kept as-is.
TWO_JUDGE_COEFFICIENT = 50
THREE_JUDGE_COEFFICIENT = 33.33

REQUIRED_JUDGES = {
    ORAL: 2,
    POSTER: 2,
    UNDERGRAD_POSTER: 3,
}

_FOUND, _TRANS, _CLIN, _PED = RESEARCH_TYPES

# 17 categories: undergrad posters are split by research type only
AWARD_CATEGORIES = (
    # Oral presentations
    AwardCategory('oral-found-adv', 'Foundational Research, Advanced Stage, Oral', ORAL, _FOUND, 'Advanced'),
    AwardCategory('oral-found-early', 'Foundational Research, Early Stage, Oral', ORAL, _FOUND, 'Early'),
    AwardCategory('oral-trans-adv', 'Translational Research, Advanced Stage, Oral', ORAL, _TRANS, 'Advanced'),
    AwardCategory('oral-trans-early', 'Translational Research, Early Stage, Oral', ORAL, _TRANS, 'Early'),
    AwardCategory('oral-clin-adv', 'Veterinary Clinical Research, Advanced Stage, Oral', ORAL, _CLIN, 'Advanced'),
    AwardCategory('oral-clin-early', 'Veterinary Clinical Research, Early Stage, Oral', ORAL, _CLIN, 'Early'),

    # Poster presentations
    AwardCategory('poster-found-adv', 'Foundational Research, Advanced Stage, Poster', POSTER, _FOUND, 'Advanced'),
    AwardCategory('poster-found-early', 'Foundational Research, Early Stage, Poster', POSTER, _FOUND, 'Early'),
    AwardCategory('poster-trans-adv', 'Translational Research, Advanced Stage, Poster', POSTER, _TRANS, 'Advanced'),
    AwardCategory('poster-trans-early', 'Translational Research, Early Stage, Poster', POSTER, _TRANS, 'Early'),
    AwardCategory('poster-clin-adv', 'Veterinary Clinical Research, Advanced Stage, Poster', POSTER, _CLIN, 'Advanced'),
    AwardCategory('poster-clin-early', 'Veterinary Clinical Research, Early Stage, Poster', POSTER, _CLIN, 'Early'),
    AwardCategory('poster-ped', 'Pedagogy Research, Poster', POSTER, _PED, None),

    # Undergraduate posters, by research type only
    AwardCategory('undergrad-found', 'Foundational Research, Undergrad Poster', UNDERGRAD_POSTER, _FOUND, None),
    AwardCategory('undergrad-trans', 'Translational Research, Undergrad Poster', UNDERGRAD_POSTER, _TRANS, None),
    AwardCategory('undergrad-clin', 'Veterinary Clinical Research, Undergrad Poster', UNDERGRAD_POSTER, _CLIN, None),
    AwardCategory('undergrad-ped', 'Pedagogy Research, Undergrad Poster', UNDERGRAD_POSTER, _PED, None),
)

AWARD_CATEGORIES_BY_ID = {category.id: category for category in AWARD_CATEGORIES}
