"""
Duplicate-title check and supervisor ranking.

Both are heuristics. The duplicate check compares a title against a short
list of known projects and adds random noise, so the same title can score
differently on each call; pass ``rng`` to make it repeatable.
"""
import random
from dataclasses import dataclass

DUPLICATE_THRESHOLD = 70
MAX_SIMILARITY = 98
OVERLAP_BONUS = 60

KNOWN_TITLES = [
    "Smart Campus Navigation System Using IoT",
    "Web-based Student Result Management Portal",
    "AI-Powered Crop Disease Detection Mobile App",
    "IT WIL Monitoring System",
    "E-Commerce Platform for SMEs",
]

AREA_KEYWORDS = {
    "web": ["web", "e-commerce", "subscription", "online shopping"],
    "mobile": ["mobile", "app", "ios", "android", "react native"],
    "ml": ["machine learning", "ai", "artificial intelligence", "data mining", "deep learning"],
    "database": ["database", "data", "sql", "nosql"],
    "security": ["security", "forensics", "blockchain", "cryptography", "digital identity"],
    "cloud": ["cloud", "aws", "azure", "devops"],
    "iot": ["iot", "smart", "sensor", "embedded"],
    "erp": ["erp", "enterprise", "business analytics", "digital transformation"],
}

BASE_SCORE = 50
KEYWORD_BONUS = 15
FULL_LOAD_PENALTY = 50
HIGH_LOAD_PENALTY = 10


@dataclass(frozen=True)
class SimilarityResult:
    percentage: int
    is_duplicate: bool

    @property
    def message(self):
        if self.is_duplicate:
            return (f"Possible Duplicate Detected! Your project title shows {self.percentage}% "
                    f"similarity with existing projects. Please revise your title to ensure originality.")
        return (f"Duplicate Check Passed - Your project title is original "
                f"({self.percentage}% similarity - below {DUPLICATE_THRESHOLD}% threshold).")


def _second_word(text):
    words = text.split()
    return words[1] if len(words) > 1 else None


def _overlaps(title, known):
    title, known = title.lower(), known.lower()
    known_word, title_word = _second_word(known), _second_word(title)
    return bool((known_word and known_word in title) or (title_word and title_word in known))


def check_duplicate(title, rng=None):
    rng = rng or random
    percentage = rng.randint(10, 39)
    if any(_overlaps(title, known) for known in KNOWN_TITLES):
        percentage = min(percentage + OVERLAP_BONUS, MAX_SIMILARITY)
    return SimilarityResult(percentage, percentage >= DUPLICATE_THRESHOLD)


def keywords_for(research_area):
    area = (research_area or "").strip().lower()
    return AREA_KEYWORDS.get(area, [area] if area else [])


def score_supervisor(research_area, supervisor):
    """Expertise match minus a load penalty, clamped to 0..100."""
    expertise = " ".join(supervisor.research_areas or []).lower()
    score = BASE_SCORE
    score += KEYWORD_BONUS * sum(1 for kw in keywords_for(research_area) if kw in expertise)

    load = supervisor.load_ratio
    if load >= 1:
        score -= FULL_LOAD_PENALTY
    elif load >= 0.75:
        score -= HIGH_LOAD_PENALTY
    return max(0, min(100, score))


def rank_supervisors(research_area, supervisors):
    """
    Supervisors with spare capacity, best match first (ties by name).
    Each returned user carries the score as ``calculated_match``.
    """
    ranked = []
    for sup in supervisors:
        if not sup.has_capacity():
            continue
        sup.calculated_match = score_supervisor(research_area, sup)
        ranked.append(sup)
    ranked.sort(key=lambda s: (-s.calculated_match, s.full_name.lower()))
    return ranked
