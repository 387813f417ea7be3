"""
Feedback & Scoring Helpers
- Maps similarity scores to feedback tiers and messages
- Awards points for graded attempts
- Tallies attempts for the current session (in memory only)
"""

import logging

import config

logger = logging.getLogger(__name__)


def feedback_tier(score: int, tiers=None) -> str:
    """Name of the highest tier whose minimum the score reaches."""
    tiers = tiers or config.get_config("FEEDBACK_TIERS", {})
    for name, minimum in sorted(tiers.items(), key=lambda kv: kv[1], reverse=True):
        if score >= minimum:
            return name
    return "keep_practicing"


def feedback_message(score: int) -> str:
    tier = feedback_tier(score)
    fallback = config.get_config("FEEDBACK_MESSAGES.keep_practicing", "")
    return config.get_config(f"FEEDBACK_MESSAGES.{tier}", fallback)


def trace_points(score: int, pass_score: int = config.TRACE_PASS_SCORE) -> int:
    """One point for a tracing attempt at or above pass_score."""
    return 1 if score >= pass_score else 0


class AttemptTally:
    """Running score and accuracy for one exercise session."""

    def __init__(self):
        self.score = 0
        self.correct = 0
        self.total = 0

    def record(self, correct: bool, points: int = 0) -> None:
        self.total += 1
        if correct:
            self.correct += 1
            self.score += points
        logger.debug(
            "Attempt %d: correct=%s score=%d", self.total, correct, self.score
        )

    def accuracy_percentage(self) -> int:
        """Percent of attempts that were correct, truncated; 0 before any attempt."""
        if self.total == 0:
            return 0
        return self.correct * 100 // self.total

    def reset(self) -> None:
        self.score = 0
        self.correct = 0
        self.total = 0
