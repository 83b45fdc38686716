# scoring/departments.py
# Department-wide award: highest mean final score, "Other" excluded

from collections import defaultdict

from .constants import OTHER_DEPARTMENT
from .final_scores import generate_all_final_scores
from .records import DepartmentScore


def calculate_department_scores(final_scores):
    """
    Mean final score and presenter count per department, counting only
    presenters with a final score. Sorted best first.
    """
    totals = defaultdict(lambda: [0.0, 0])
    for fs in final_scores:
        if fs.final_score is None:
            continue
        department = fs.presenter.department
        if department == OTHER_DEPARTMENT:
            continue
        totals[department][0] += fs.final_score
        totals[department][1] += 1

    department_scores = [
        DepartmentScore(department=department, average_score=total / count, presenter_count=count)
        for department, (total, count) in totals.items()
    ]
    department_scores.sort(key=lambda d: d.average_score, reverse=True)
    return department_scores


def get_top_department(presenters, scores):
    """The Golden Pipette department, or None while nothing is scored."""
    department_scores = calculate_department_scores(generate_all_final_scores(presenters, scores))
    return department_scores[0] if department_scores else None
