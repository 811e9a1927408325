"""
Matching Service

PURPOSE:
Rank internship listings against a student profile, producing a score
(0-100) and a short rationale per listing.

HOW IT WORKS:
1. PRIMARY: enumerate the listings (1-based) into a prompt, ask the
   ranking service for its top picks as JSON, and map each reported id
   back to the listing at that position.
2. FALLBACK: deterministic point accumulation over skills, interests
   and work mode. Used when the service is not configured, fails, or
   answers with something we cannot use.

The primary path returns at most `top_n` listings; the fallback scores
every listing. Both return results sorted by score, highest first,
with ties kept in input order.
"""

from typing import List, Optional, Sequence

from app.core.errors import ResponseParseError
from app.core.log import get_logger
from app.core.result import Result, with_fallback
from app.schemas.schemas import AIRecommendationPayload, Internship, MatchResult, Profile
from app.services.ai_client import RankingClient

log = get_logger(__name__)


# ============================================================
# HEURISTIC SCORING
# ============================================================

BASE_SCORE = 50
SKILL_BONUS = 20
INTEREST_BONUS = 20
REMOTE_BONUS = 10
MAX_SCORE = 100

REASON_DEFAULT = "basic compatibility match"
REASON_SKILLS = "skills align with requirements"
REASON_INTERESTS = " and matches career interests"


def _terms(values: Sequence[str]) -> List[str]:
    # A blank term would be a substring of everything
    return [v.strip().lower() for v in values if v and v.strip()]


def has_skill_match(profile: Profile, internship: Internship) -> bool:
    """True if any profile skill appears inside any required skill tag."""
    required = [s.lower() for s in internship.skills]
    return any(skill in tag for skill in _terms(profile.skills) for tag in required)


def has_interest_match(profile: Profile, internship: Internship) -> bool:
    """True if any profile interest appears in the listing's type or title."""
    listing_type = internship.type.lower()
    title = internship.title.lower()
    return any(
        interest in listing_type or interest in title
        for interest in _terms(profile.interests)
    )


def score_internship(profile: Profile, internship: Internship) -> MatchResult:
    score = BASE_SCORE
    reasoning = REASON_DEFAULT

    if has_skill_match(profile, internship):
        score += SKILL_BONUS
        reasoning = REASON_SKILLS

    if has_interest_match(profile, internship):
        score += INTEREST_BONUS
        reasoning += REASON_INTERESTS

    if profile.work_type.strip().lower() == "remote" and internship.remote:
        score += REMOTE_BONUS

    return MatchResult(
        internship=internship,
        match_score=max(0, min(score, MAX_SCORE)),
        reasoning=reasoning
    )


def fallback_matching(profile: Profile, internships: Sequence[Internship]) -> List[MatchResult]:
    """Score every listing; stable sort keeps input order on ties."""
    scored = [score_internship(profile, internship) for internship in internships]
    return sorted(scored, key=lambda r: r.match_score, reverse=True)


# ============================================================
# AI RANKING
# ============================================================

SYSTEM_PROMPT = """You are an AI career counselor for the PM Internship Scheme in India.
Your job is to match candidates with suitable internships based on their profiles.
Consider skills, interests, location preferences, education background, and career aspirations.
Focus on opportunities that would benefit first-generation learners and students from diverse backgrounds.
Return ONLY valid JSON."""


def build_recommendation_prompt(
    profile: Profile,
    internships: Sequence[Internship],
    top_n: int = 5
) -> str:
    """
    Profile summary followed by every listing numbered from 1.
    The numbers are the ids the service must answer with.
    """
    lines = [
        "User Profile:",
        f"- Name: {profile.name}",
        f"- Education: {profile.education_level} in {profile.field_of_study}",
        f"- Skills: {', '.join(profile.skills)}",
        f"- Interests: {', '.join(profile.interests)}",
        f"- Location: {profile.state}",
        f"- Preferred Duration: {profile.duration}",
        f"- Work Type Preference: {profile.work_type}",
        "",
        "Available Internships:",
    ]
    for index, internship in enumerate(internships, start=1):
        lines.extend([
            f"{index}. {internship.title} at {internship.company}",
            f"   - Location: {internship.location}",
            f"   - Duration: {internship.duration}",
            f"   - Skills Required: {', '.join(internship.skills)}",
            f"   - Type: {internship.type}",
            f"   - Remote: {'Yes' if internship.remote else 'No'}",
            f"   - Requirements: {', '.join(internship.requirements)}",
        ])
    lines.extend([
        "",
        f"Please analyze and rank the top {top_n} internships for this candidate. "
        "For each recommendation, provide:",
        "1. Internship ID (use the number from the list)",
        "2. Match Score (0-100)",
        "3. Brief reasoning (2-3 sentences explaining why it's a good match)",
        "",
        "Format your response as JSON:",
        '{"recommendations": [{"id": 1, "matchScore": 95, "reasoning": "Excellent match because..."}]}',
    ])
    return "\n".join(lines)


def resolve_recommendations(
    payload: AIRecommendationPayload,
    internships: Sequence[Internship],
    top_n: int = 5
) -> List[MatchResult]:
    """
    Map 1-based ids back onto `internships`.

    Ids outside 1..len(internships) are dropped, as are repeats of an
    id already taken. At most top_n results, sorted by score.
    """
    results: List[MatchResult] = []
    seen = set()
    for rec in payload.recommendations:
        if not 1 <= rec.id <= len(internships):
            log.debug("Dropping recommendation with unknown id %s", rec.id)
            continue
        if rec.id in seen:
            continue
        seen.add(rec.id)
        results.append(MatchResult(
            internship=internships[rec.id - 1],
            match_score=rec.match_score,
            reasoning=rec.reasoning
        ))
        if len(results) == top_n:
            break
    return sorted(results, key=lambda r: r.match_score, reverse=True)


# ============================================================
# SCORER
# ============================================================

class MatchScorer:
    """
    Ranks listings for a profile: AI first, heuristic as fallback.

    Stateless apart from its collaborators; safe to share across
    requests. Inputs are never modified.
    """

    def __init__(self, ranking_client: Optional[RankingClient] = None, top_n: int = 5):
        self.ranking_client = ranking_client
        self.top_n = top_n

    def rank_with_ai(self, profile: Profile, internships: Sequence[Internship]) -> Result[List[MatchResult]]:
        prompt = build_recommendation_prompt(profile, internships, self.top_n)
        response = self.ranking_client.rank(SYSTEM_PROMPT, prompt)
        if not response.is_ok:
            return Result.err(response.error)

        results = resolve_recommendations(response.value, internships, self.top_n)
        if not results:
            return Result.err(ResponseParseError("no recommendation referenced a known listing"))
        return Result.ok(results)

    def score(self, profile: Profile, internships: Sequence[Internship]) -> List[MatchResult]:
        """
        Rank `internships` for `profile`. Never raises on service failure.

        Returns:
            MatchResults, highest score first
        """
        if not internships:
            return []

        if self.ranking_client is None:
            results = fallback_matching(profile, internships)
            log.info("Scored %d internships with heuristic matching", len(results))
            return results

        results = with_fallback(
            lambda: self.rank_with_ai(profile, internships),
            lambda: fallback_matching(profile, internships),
            label="AI ranking"
        )
        log.info("Ranked %d of %d internships for profile %s", len(results), len(internships), profile.id)
        return results
