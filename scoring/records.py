# scoring/records.py
# Snapshot records the scoring core works on. They carry no database state:
# the repository builds them from rows, the core only reads them.

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Presenter:
    id: str
    first_name: str
    last_name: str
    classification: str
    research_stage: Optional[str]
    research_type: str
    department: str
    presentation_type: str
    judge1: Optional[str] = None
    judge2: Optional[str] = None
    judge3: Optional[str] = None  # only used for undergrad posters
    email: str = ''
    title: str = ''
    presentation_time: Optional[str] = None

    @property
    def full_name(self):
        return f'{self.first_name} {self.last_name}'.strip()

    @property
    def judge_slots(self):
        return (self.judge1, self.judge2, self.judge3)

    @property
    def assigned_judges(self):
        """Judge names in slot order, blank slots skipped."""
        return [name for name in self.judge_slots if name and name.strip()]


@dataclass(frozen=True)
class ScoreCriteria:
    """Seven rubric ratings, each expected in [1, 5]."""
    content_why: int
    content_what_how: int
    content_next_steps: int
    presentation_flow: int
    preparedness: int
    verbal_comm: int
    visual_aids: int

    def values(self):
        return (
            self.content_why,
            self.content_what_how,
            self.content_next_steps,
            self.presentation_flow,
            self.preparedness,
            self.verbal_comm,
            self.visual_aids,
        )


@dataclass(frozen=True)
class Score:
    id: str
    presenter_id: str
    judge_name: str
    judge_id: str
    criteria: ScoreCriteria
    weighted_total: float
    is_no_show: bool = False
    timestamp: Optional[str] = None


@dataclass(frozen=True)
class CriterionBreakdown:
    criterion: str
    raw_score: int
    weight: int
    weighted_score: int


@dataclass(frozen=True)
class NormalizedScore:
    score_id: str
    presenter_id: str
    judge_id: str
    judge_name: str
    weighted_total: float
    judge_average: float
    normalized_score: float


@dataclass(frozen=True)
class FinalScore:
    presenter_id: str
    presenter: Presenter
    judge1_score: Optional[NormalizedScore]
    judge2_score: Optional[NormalizedScore]
    judge3_score: Optional[NormalizedScore]
    final_score: Optional[float]


@dataclass(frozen=True)
class AwardCategory:
    id: str
    name: str
    presentation_type: str
    research_type: Optional[str]  # None matches any
    research_stage: Optional[str]  # None matches any
    places: int = 3


@dataclass(frozen=True)
class CategoryWinner:
    category_id: str
    category: str
    place: int
    presenter: Presenter
    final_score: float


@dataclass(frozen=True)
class DepartmentScore:
    department: str
    average_score: float
    presenter_count: int


@dataclass(frozen=True)
class Anomaly:
    type: str
    description: str
    score_id: str
    severity: str  # 'low' | 'medium' | 'high'


@dataclass(frozen=True)
class Judge:
    id: str
    name: str
    assigned_presenters: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PresenterScoreStatus:
    presenter_id: str
    status: str  # 'pending' | 'partial' | 'complete' | 'no-show'
    judges_scored: List[str]
    judges_missing: List[str]


@dataclass(frozen=True)
class PendingScore:
    presenter_id: str
    presenter_name: str
    judge_name: str
    session_time: Optional[str]
    presentation_type: str


@dataclass(frozen=True)
class Feedback:
    """Written comments on a presentation. Not part of any score."""
    id: str
    presenter_id: str
    presenter_name: str
    submitter_type: str  # 'judge' | 'attendee'
    submitter_name: str
    strengths: str = ''
    areas_for_improvement: str = ''
    timestamp: Optional[str] = None
