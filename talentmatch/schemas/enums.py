from __future__ import annotations

from enum import Enum
from typing import Literal

WorkMode = Literal["remote", "hybrid", "office"]
SkillWeight = Literal["required", "preferred"]
SortKey = Literal["weighted", "match", "salary_low", "salary_high"]


class Dimension(str, Enum):
    SKILLS = "skills"
    CERTIFICATIONS = "certifications"
    SENIORITY = "seniority"
    SALARY = "salary"
    INDUSTRY = "industry"
    REGULATORY = "regulatory"
    COMPANY_SIZE = "company_size"
    CULTURE = "culture"
    PERKS = "perks"
    WORK_MODE = "work_mode"
    WORK_STYLE = "work_style"
    TEAM_FIT = "team_fit"
    PERFORMANCE = "performance"
    LANGUAGE = "language"
    TIMEZONE = "timezone"
    VISA = "visa"
    RELOCATION = "relocation"
    MANAGEMENT_FIT = "management_fit"
    TRAITS = "traits"
    ROLE_ALIGNMENT = "role_alignment"


class OverlapPolicy(str, Enum):
    ASYNC_FIRST = "async_first"
    FULL_OVERLAP = "full_overlap"
    OVERLAP_4_PLUS = "overlap_4_plus"
    OVERLAP_2_PLUS = "overlap_2_plus"


class LanguageProficiency(str, Enum):
    BASIC = "basic"
    CONVERSATIONAL = "conversational"
    PROFESSIONAL = "professional"
    FLUENT = "fluent"
    NATIVE = "native"


class PerformanceAxis(str, Enum):
    COMMUNICATION = "communication"
    PROBLEM_SOLVING = "problem_solving"
    RELIABILITY = "reliability"
    COLLABORATION = "collaboration"


class WorkStyleKey(str, Enum):
    WORK_HOURS = "work_hours"
    WORK_INTENSITY = "work_intensity"
    PROJECT_DURATION = "project_duration"
    CONTEXT_SWITCHING = "context_switching"
    AUTONOMY_LEVEL = "autonomy_level"
    DECISION_MAKING = "decision_making"
    RISK_TOLERANCE = "risk_tolerance"
    INNOVATION_STABILITY = "innovation_stability"
    AMBIGUITY_TOLERANCE = "ambiguity_tolerance"
    CHANGE_FREQUENCY = "change_frequency"


class TeamKey(str, Enum):
    TEAM_SIZE_PREFERENCE = "team_size_preference"
    COLLABORATION_FREQUENCY = "collaboration_frequency"
    PAIR_PROGRAMMING = "pair_programming"
    CROSS_FUNCTIONAL = "cross_functional"
    REPORTING_STRUCTURE = "reporting_structure"
    ORG_SIZE_PREFERENCE = "org_size_preference"
    TEAM_DISTRIBUTION = "team_distribution"
    TIMEZONE_OVERLAP = "timezone_overlap"


class ManagementKey(str, Enum):
    LEADERSHIP_STYLE = "leadership_style"
    FEEDBACK_FREQUENCY = "feedback_frequency"
    COMMUNICATION_PREFERENCE = "communication_preference"
    MEETING_CULTURE = "meeting_culture"
    CONFLICT_RESOLUTION = "conflict_resolution"
    GROWTH_EXPECTATION = "growth_expectation"
    MENTORSHIP_APPROACH = "mentorship_approach"


class WeightAxis(str, Enum):
    SKILLS = "skills"
    COMPENSATION = "compensation"
    CULTURE = "culture"
