from .enums import (
    Dimension,
    LanguageProficiency,
    ManagementKey,
    OverlapPolicy,
    PerformanceAxis,
    TeamKey,
    WeightAxis,
    WorkStyleKey,
)
from .match import (
    INVALID_DATA_REASON,
    MatchBreakdown,
    MatchDetail,
    MatchWeights,
    Point,
    RankedMatch,
    VerificationBoost,
)
from .profiles import (
    CandidateProfile,
    CompanyProfile,
    HiringManagerPreferences,
    JobPosting,
    JobSkillRequirement,
    LanguageRequirement,
    LanguageSkill,
    PerformanceScores,
    Skill,
    TalentSearchCriteria,
    VerificationStats,
    VerifiedSkillStat,
)

__all__ = [
    "Dimension",
    "LanguageProficiency",
    "ManagementKey",
    "OverlapPolicy",
    "PerformanceAxis",
    "TeamKey",
    "WeightAxis",
    "WorkStyleKey",
    "INVALID_DATA_REASON",
    "MatchBreakdown",
    "MatchDetail",
    "MatchWeights",
    "Point",
    "RankedMatch",
    "VerificationBoost",
    "CandidateProfile",
    "CompanyProfile",
    "HiringManagerPreferences",
    "JobPosting",
    "JobSkillRequirement",
    "LanguageRequirement",
    "LanguageSkill",
    "PerformanceScores",
    "Skill",
    "TalentSearchCriteria",
    "VerificationStats",
    "VerifiedSkillStat",
]
