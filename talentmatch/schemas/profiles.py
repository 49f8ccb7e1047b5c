from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .enums import (
    LanguageProficiency,
    ManagementKey,
    OverlapPolicy,
    PerformanceAxis,
    SkillWeight,
    TeamKey,
    WorkMode,
    WorkStyleKey,
)


class Skill(BaseModel):
    name: str = Field(min_length=1)
    level: int = Field(ge=1, le=5)
    years: float | None = Field(default=None, ge=0)


class JobSkillRequirement(BaseModel):
    name: str = Field(min_length=1)
    required_level: int = Field(default=3, ge=1, le=5)
    weight: SkillWeight = "required"


class VerifiedSkillStat(BaseModel):
    skill: str
    avg_assessed_level: float = Field(ge=0, le=5)
    level_agreement_rate: float = Field(ge=0, le=1)
    verification_count: int = Field(default=0, ge=0)


class PerformanceScores(BaseModel):
    communication: float = Field(default=5.0, ge=0, le=10)
    problem_solving: float = Field(default=5.0, ge=0, le=10)
    reliability: float = Field(default=5.0, ge=0, le=10)
    collaboration: float = Field(default=5.0, ge=0, le=10)

    def axis(self, axis: PerformanceAxis) -> float:
        return float(getattr(self, axis.value))


class VerificationStats(BaseModel):
    """Aggregate of third-party verifications attached to a candidate."""

    total_verifications: int = Field(default=0, ge=0)
    verified_skills: list[VerifiedSkillStat] = Field(default_factory=list)
    performance: PerformanceScores | None = None


class LanguageSkill(BaseModel):
    language: str = Field(min_length=1)
    proficiency: LanguageProficiency


class LanguageRequirement(BaseModel):
    language: str = Field(min_length=1)
    min_proficiency: LanguageProficiency = LanguageProficiency.PROFESSIONAL
    required: bool = True


class CandidateProfile(BaseModel):
    id: str | None = None
    name: str | None = None
    skills: list[Skill] = Field(default_factory=list)
    languages: list[LanguageSkill] = Field(default_factory=list)
    timezone: str | None = None
    salary_min: float | None = Field(default=None, ge=0)
    preferred_work_modes: list[WorkMode] = Field(default_factory=list)
    desired_seniority: list[str] = Field(default_factory=list)
    work_style_preferences: dict[WorkStyleKey, str] | None = None
    team_preferences: dict[TeamKey, str] | None = None
    management_preferences: dict[ManagementKey, str] | None = None
    interested_industries: list[str] = Field(default_factory=list)
    requires_sponsorship: bool = False
    willing_to_relocate: bool = False
    verification_stats: VerificationStats | None = None
    regulatory_experience: list[str] = Field(default_factory=list)
    preferred_company_focus: list[str] = Field(default_factory=list)
    preferred_mission_orientation: list[str] = Field(default_factory=list)
    preferred_work_style: list[str] = Field(default_factory=list)
    preferred_company_size: list[str] = Field(default_factory=list)
    character_traits: list[str] = Field(default_factory=list)
    primary_role_id: str | None = None
    secondary_role_ids: list[str] = Field(default_factory=list)

    @property
    def role_ids(self) -> list[str]:
        roles = [self.primary_role_id] if self.primary_role_id else []
        return roles + [role for role in self.secondary_role_ids if role]


class CompanyProfile(BaseModel):
    id: str | None = None
    company_name: str | None = None
    industries: list[str] = Field(default_factory=list)
    size_range: str | None = None
    timezone: str | None = None
    work_style_defaults: dict[WorkStyleKey, str] = Field(default_factory=dict)
    team_defaults: dict[TeamKey, str] = Field(default_factory=dict)
    focus_type: str | None = None
    mission_orientation: str | None = None
    work_style: str | None = None


class HiringManagerPreferences(BaseModel):
    id: str | None = None
    name: str | None = None
    preferences: dict[ManagementKey, str] = Field(default_factory=dict)
    dealbreakers: list[ManagementKey] = Field(default_factory=list)


class JobPosting(BaseModel):
    id: str | None = None
    title: str | None = None
    company_id: str | None = None
    skills: list[JobSkillRequirement] = Field(default_factory=list)
    required_certifications: list[str] = Field(default_factory=list)
    preferred_certifications: list[str] = Field(default_factory=list)
    regulatory_domains: list[str] = Field(default_factory=list)
    language_requirements: list[LanguageRequirement] = Field(default_factory=list)
    timezone: str | None = None
    timezone_overlap: OverlapPolicy | None = None
    offers_visa_sponsorship: bool = False
    offers_relocation: bool = False
    work_style_requirements: dict[WorkStyleKey, str] = Field(default_factory=dict)
    team_requirements: dict[TeamKey, str] = Field(default_factory=dict)
    work_style_dealbreakers: list[WorkStyleKey] = Field(default_factory=list)
    team_dealbreakers: list[TeamKey] = Field(default_factory=list)
    performance_minimums: dict[PerformanceAxis, float] = Field(default_factory=dict)
    salary_max: float | None = Field(default=None, ge=0)
    work_mode: WorkMode | None = None
    seniority: str | None = None
    required_traits: list[str] = Field(default_factory=list)
    desired_traits: list[str] = Field(default_factory=list)

    @field_validator("performance_minimums")
    @classmethod
    def _validate_performance_minimums(cls, value: dict[PerformanceAxis, float]) -> dict[PerformanceAxis, float]:
        for axis, minimum in value.items():
            if minimum < 0 or minimum > 10:
                raise ValueError(f"performance minimum for {axis.value} must be between 0 and 10")
        return value


class TalentSearchCriteria(BaseModel):
    """Free-form search filters a recruiter runs against the candidate pool."""

    title: str | None = None
    skills: list[JobSkillRequirement] = Field(default_factory=list)
    required_certifications: list[str] = Field(default_factory=list)
    preferred_certifications: list[str] = Field(default_factory=list)
    regulatory_domains: list[str] = Field(default_factory=list)
    language_requirements: list[LanguageRequirement] = Field(default_factory=list)
    timezone: str | None = None
    timezone_overlap: OverlapPolicy | None = None
    offers_visa_sponsorship: bool = False
    offers_relocation: bool = False
    work_style_requirements: dict[WorkStyleKey, str] = Field(default_factory=dict)
    team_requirements: dict[TeamKey, str] = Field(default_factory=dict)
    work_style_dealbreakers: list[WorkStyleKey] = Field(default_factory=list)
    team_dealbreakers: list[TeamKey] = Field(default_factory=list)
    performance_minimums: dict[PerformanceAxis, float] = Field(default_factory=dict)
    salary_max: float | None = Field(default=None, ge=0)
    work_mode: WorkMode | None = None
    seniority: str | None = None
    required_traits: list[str] = Field(default_factory=list)
    desired_traits: list[str] = Field(default_factory=list)
    role_ids: list[str] = Field(default_factory=list)
    include_related_roles: bool = False
    role_families: dict[str, str] = Field(default_factory=dict)
