from __future__ import annotations

from dataclasses import dataclass, field

SKILL_CATEGORIES = ("technical", "soft", "domain", "tools")
EXPERIENCE_LEVELS = ("entry", "mid", "senior", "lead", "executive")
LEARNING_LEVELS = ("beginner", "intermediate", "advanced")


@dataclass(frozen=True)
class Skill:
    name: str
    category: str
    proficiency: int
    years_experience: int


@dataclass
class ExperienceSummary:
    total_years: int = 0
    leadership_indicator_count: int = 0
    seniority_keywords: list[str] = field(default_factory=list)
    responsibilities: list[str] = field(default_factory=list)
    achievements: list[str] = field(default_factory=list)
    companies: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SalaryRange:
    min: int
    max: int
    median: int


@dataclass(frozen=True)
class RoleLevel:
    title: str
    skills: tuple[str, ...]
    responsibilities: tuple[str, ...]
    salary_range: tuple[int, int] | None = None


@dataclass(frozen=True)
class RoleProfile:
    id: str
    name: str
    title_keywords: tuple[str, ...]
    required_skills: tuple[str, ...]
    responsibility_verbs: tuple[str, ...]
    levels: dict[str, RoleLevel] = field(default_factory=dict)
    base_salary: int | None = None


@dataclass
class RoleClassification:
    primary_role: str
    confidence: float
    alternative_roles: list[str]
    scores: dict[str, int] = field(default_factory=dict)


@dataclass
class MarketRecommendation:
    type: str
    priority: str
    message: str


@dataclass
class MarketPosition:
    competitiveness: float
    salary_range: SalaryRange
    demand_level: str
    recommendations: list[MarketRecommendation]


@dataclass
class CareerAssessment:
    current_role: str
    experience_level: str
    skills: tuple[Skill, ...]
    strengths: list[str]
    market_position: MarketPosition
    confidence: float
    experience: ExperienceSummary = field(default_factory=ExperienceSummary)
    role_classification: RoleClassification | None = None


@dataclass
class TargetRequirements:
    core_skills: list[str]
    level_specific_skills: list[str]
    responsibilities: list[str]
    salary_range: tuple[int, int] | None = None

    @property
    def all_skills(self) -> list[str]:
        merged: list[str] = []
        for skill in [*self.core_skills, *self.level_specific_skills]:
            if skill not in merged:
                merged.append(skill)
        return merged


@dataclass
class MissingSkill:
    name: str
    importance: int
    category: str
    estimated_learning_hours: int


@dataclass
class SkillToImprove:
    name: str
    category: str
    proficiency: int
    years_experience: int
    importance: int
    target_proficiency: int
    improvement_needed: int
    estimated_learning_hours: int


@dataclass
class PrioritizedSkill:
    name: str
    kind: str
    importance: int
    category: str
    estimated_learning_hours: int

    @property
    def priority_score(self) -> float:
        return self.importance - self.estimated_learning_hours / 100.0


@dataclass
class PriorityTiers:
    high: list[PrioritizedSkill] = field(default_factory=list)
    medium: list[PrioritizedSkill] = field(default_factory=list)
    low: list[PrioritizedSkill] = field(default_factory=list)

    def ordered(self) -> list[PrioritizedSkill]:
        return [*self.high, *self.medium, *self.low]


@dataclass
class LearningPhase:
    name: str
    duration_weeks: int
    skills: list[str]
    description: str


@dataclass
class Timeline:
    total_hours: int
    weeks: int
    months: int
    phases: list[LearningPhase] = field(default_factory=list)


@dataclass
class Milestone:
    id: int
    title: str
    description: str
    skills: list[PrioritizedSkill]
    estimated_weeks: int
    completion_criteria: str


@dataclass(frozen=True)
class LearningResource:
    type: str
    title: str
    provider: str
    duration: str
    cost: str
    url: str
    rating: float
    description: str = ""


@dataclass
class SkillMilestone:
    id: int
    title: str
    description: str
    estimated_hours: int


@dataclass
class SkillAssessment:
    type: str
    title: str
    description: str
    questions: int | None = None
    passing_score: int | None = None
    requirements: list[str] = field(default_factory=list)
    estimated_hours: int | None = None


@dataclass
class LearningModule:
    skill_name: str
    level: str
    estimated_hours: int
    priority: int
    resources: list[LearningResource]
    milestones: list[SkillMilestone]
    assessments: list[SkillAssessment]


@dataclass
class SkillsGapAnalysis:
    target_role: str
    target_level: str
    missing_skills: list[MissingSkill]
    skills_to_improve: list[SkillToImprove]
    strength_skills: list[Skill]
    timeline: Timeline
    priority: PriorityTiers
    learning_path: list[LearningModule]
    milestones: list[Milestone]
    requirements: TargetRequirements | None = None


@dataclass
class CareerReport:
    assessment: CareerAssessment
    gap_analysis: SkillsGapAnalysis
