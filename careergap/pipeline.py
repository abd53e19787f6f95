from __future__ import annotations

from functools import lru_cache

from loguru import logger

from careergap.catalog import ReferenceData, load_reference_data
from careergap.errors import AnalysisFailure, CareerGapError, InsufficientInputError
from careergap.gap_analysis import SkillsGapAnalyzer
from careergap.models import CareerAssessment, CareerReport, SkillsGapAnalysis
from careergap.scoring import CareerAssessmentBuilder


@lru_cache(maxsize=1)
def default_reference_data() -> ReferenceData:
    return load_reference_data()


def _require_text(text: str | None) -> str:
    if text is None or not text.strip():
        raise InsufficientInputError()
    return text


def assess_career(
    text: str | None,
    reference: ReferenceData | None = None,
    current_year: int | None = None,
) -> CareerAssessment:
    text = _require_text(text)
    reference = reference or default_reference_data()
    try:
        return CareerAssessmentBuilder(reference, current_year=current_year).build(text)
    except CareerGapError:
        raise
    except Exception as exc:
        logger.error(f"Career assessment failed: {type(exc).__name__}: {exc}")
        raise AnalysisFailure("Failed to assess career level", stage="assessment", original_error=exc) from exc


def analyze_gap(
    assessment: CareerAssessment,
    target_role: str,
    target_level: str | None = None,
    reference: ReferenceData | None = None,
) -> SkillsGapAnalysis:
    reference = reference or default_reference_data()
    try:
        return SkillsGapAnalyzer(reference).analyze(assessment, target_role, target_level)
    except CareerGapError:
        raise
    except Exception as exc:
        logger.error(f"Skills gap analysis failed: {type(exc).__name__}: {exc}")
        raise AnalysisFailure("Failed to analyze skills gap", stage="gap_analysis", original_error=exc) from exc


def analyze_career(
    text: str | None,
    target_role: str,
    target_level: str | None = None,
    reference: ReferenceData | None = None,
    current_year: int | None = None,
) -> CareerReport:
    """
    Run the full pipeline: résumé text -> assessment -> gap analysis.

    Raises:
        InsufficientInputError: text is missing or blank
        UnknownRoleError: target_role is not in the role catalog
        AnalysisFailure: any unexpected error inside a stage
    """
    logger.debug(f"Analyzing career against {target_role} (level={target_level})")
    assessment = assess_career(text, reference=reference, current_year=current_year)
    gap_analysis = analyze_gap(assessment, target_role, target_level, reference=reference)
    logger.info(
        f"Analysis complete: {assessment.current_role}/{assessment.experience_level} -> "
        f"{gap_analysis.target_role}/{gap_analysis.target_level}, "
        f"{gap_analysis.timeline.total_hours}h over {len(gap_analysis.milestones)} milestones"
    )
    return CareerReport(assessment=assessment, gap_analysis=gap_analysis)
