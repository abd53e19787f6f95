from __future__ import annotations

from dataclasses import asdict

import pandas as pd

from careergap.career_connectors import build_training_links
from careergap.models import CareerReport, SkillsGapAnalysis

GAP_FRAME_COLUMNS = ["Skill", "Status", "Category", "Current", "Target", "Importance", "Hours"]
MILESTONE_FRAME_COLUMNS = ["Milestone", "Title", "Skills", "Weeks", "Criteria"]


def export_payload(report: CareerReport) -> dict:
    """JSON-ready rendering of a full report."""
    gap = report.gap_analysis
    top_gaps = [item.name for item in gap.priority.high]
    return {
        "assessment": asdict(report.assessment),
        "gap_analysis": asdict(gap),
        "training_links": build_training_links(top_gaps),
    }


def skills_gap_frame(analysis: SkillsGapAnalysis) -> pd.DataFrame:
    rows = [
        {
            "Skill": item.name,
            "Status": "missing",
            "Category": item.category,
            "Current": 0,
            "Target": 4,
            "Importance": item.importance,
            "Hours": item.estimated_learning_hours,
        }
        for item in analysis.missing_skills
    ]
    rows += [
        {
            "Skill": item.name,
            "Status": "improve",
            "Category": item.category,
            "Current": item.proficiency,
            "Target": item.target_proficiency,
            "Importance": item.importance,
            "Hours": item.estimated_learning_hours,
        }
        for item in analysis.skills_to_improve
    ]
    rows += [
        {
            "Skill": skill.name,
            "Status": "strength",
            "Category": skill.category,
            "Current": skill.proficiency,
            "Target": 4,
            "Importance": None,
            "Hours": 0,
        }
        for skill in analysis.strength_skills
    ]
    return pd.DataFrame(rows, columns=GAP_FRAME_COLUMNS)


def milestone_frame(analysis: SkillsGapAnalysis) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Milestone": milestone.id,
                "Title": milestone.title,
                "Skills": ", ".join(item.name for item in milestone.skills),
                "Weeks": milestone.estimated_weeks,
                "Criteria": milestone.completion_criteria,
            }
            for milestone in analysis.milestones
        ],
        columns=MILESTONE_FRAME_COLUMNS,
    )
