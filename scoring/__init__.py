# scoring/__init__.py
# Pure scoring core: rubric totals -> judge normalization -> final scores
# -> category winners and the department award

from .records import (
    Anomaly,
    AwardCategory,
    CategoryWinner,
    CriterionBreakdown,
    DepartmentScore,
    Feedback,
    FinalScore,
    Judge,
    NormalizedScore,
    PendingScore,
    Presenter,
    PresenterScoreStatus,
    Score,
    ScoreCriteria,
)
from .constants import AWARD_CATEGORIES, AWARD_CATEGORIES_BY_ID, CRITERIA_WEIGHTS
from .rubric import build_score, calculate_weighted_total, get_weighted_breakdown
from .normalization import calculate_judge_average, generate_all_normalized_scores, normalize_score
from .final_scores import calculate_final_score, generate_all_final_scores
from .categories import (
    get_all_category_winners,
    get_category_winners,
    get_presenters_by_category,
    matches_category,
)
from .departments import calculate_department_scores, get_top_department
from .anomalies import detect_anomalies
from .progress import (
    get_category_completion_percent,
    get_completion_percent,
    get_pending_scores,
    get_presenter_status,
    is_category_complete,
    required_judge_count,
)
from .judges import build_judge_roster, get_judge_assignments, judge_id_from_name, normalize_judge_name
