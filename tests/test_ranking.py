import unittest
import sys
from pathlib import Path
from unittest import mock

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from talentmatch.schemas import CandidateProfile, JobPosting, JobSkillRequirement, MatchWeights, Skill
from talentmatch.scoring import calculate_match, rank_candidates, rank_jobs, sort_matches
from talentmatch.scoring import ranking


def python_job(job_id="job-1", salary_max=None, required_level=3):
    return JobPosting(
        id=job_id,
        skills=[JobSkillRequirement(name="Python", required_level=required_level)],
        salary_max=salary_max,
    )


def candidate(candidate_id, level, salary_min=None):
    return CandidateProfile(id=candidate_id, skills=[Skill(name="Python", level=level)], salary_min=salary_min)


class RankCandidatesTests(unittest.TestCase):
    def setUp(self):
        self.candidates = [
            candidate("weak", 1, salary_min=90000),
            candidate("exact", 3, salary_min=120000),
            candidate("close", 2),
        ]

    def test_sorted_by_weighted_score(self):
        results = rank_candidates(python_job(), self.candidates, MatchWeights(skills=100))
        self.assertEqual([item.candidate_id for item in results], ["exact", "close", "weak"])
        self.assertEqual(results[0].weighted_score, 100)
        self.assertTrue(all(item.error is None for item in results))

    def test_sorted_by_salary(self):
        low = rank_candidates(python_job(), self.candidates, sort_by="salary_low")
        self.assertEqual([item.candidate_id for item in low], ["weak", "exact", "close"])
        high = rank_candidates(python_job(), self.candidates, sort_by="salary_high")
        self.assertEqual([item.candidate_id for item in high], ["exact", "weak", "close"])

    def test_certification_lookup_per_candidate(self):
        job = python_job().model_copy(update={"required_certifications": ["PCAP"]})
        results = rank_candidates(
            job,
            self.candidates,
            MatchWeights(skills=100),
            candidate_cert_ids={"exact": [], "close": ["PCAP"]},
            sort_by="match",
        )
        by_id = {item.candidate_id: item for item in results}
        self.assertEqual(by_id["exact"].breakdown.overall_score, 0)
        self.assertGreater(by_id["close"].breakdown.overall_score, 0)
        # No entry for "weak" means certification data is unavailable, not empty.
        self.assertNotIn("Missing required certifications", by_id["weak"].breakdown.deal_breakers)

    def test_hard_gated_candidate_sorts_below_qualified(self):
        job = python_job().model_copy(update={"required_certifications": ["PCAP"]})
        results = rank_candidates(
            job,
            [candidate("uncertified", 3), candidate("certified", 1)],
            MatchWeights(skills=100),
            candidate_cert_ids={"uncertified": [], "certified": ["PCAP"]},
        )
        self.assertEqual([item.candidate_id for item in results], ["certified", "uncertified"])
        self.assertEqual(results[1].breakdown.deal_breakers, ("Missing required certifications",))
        self.assertEqual(results[1].weighted_score, 0)
        self.assertGreater(results[0].weighted_score, 0)

    def test_one_failure_does_not_abort_batch(self):
        def flaky(job, profile, *args, **kwargs):
            if profile.id == "close":
                raise RuntimeError("profile store timeout")
            return calculate_match(job, profile, *args, **kwargs)

        with mock.patch.object(ranking, "calculate_match", side_effect=flaky):
            with self.assertLogs("talentmatch.scoring.ranking", level="WARNING"):
                results = rank_candidates(python_job(), self.candidates, MatchWeights(skills=1))

        by_id = {item.candidate_id: item for item in results}
        self.assertEqual(len(results), 3)
        self.assertTrue(by_id["close"].breakdown.is_invalid)
        self.assertEqual(by_id["close"].error, "profile store timeout")
        self.assertEqual(results[-1].candidate_id, "close")
        self.assertEqual(by_id["exact"].weighted_score, 100)

    def test_unknown_sort_key(self):
        with self.assertRaises(ValueError):
            sort_matches([], "alphabetical")


class RankJobsTests(unittest.TestCase):
    def test_jobs_for_candidate(self):
        jobs = [
            python_job("stretch", salary_max=200000, required_level=5),
            python_job("fit", salary_max=150000, required_level=3),
        ]
        results = rank_jobs(candidate("me", 3), jobs, MatchWeights(skills=100))
        self.assertEqual([item.job_id for item in results], ["fit", "stretch"])
        by_salary = rank_jobs(candidate("me", 3), jobs, sort_by="salary_high")
        self.assertEqual(by_salary[0].job_id, "stretch")
        self.assertEqual(by_salary[0].salary, 200000)


if __name__ == "__main__":
    unittest.main()
