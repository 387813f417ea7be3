"""
Configuration file for the Response Evaluation Engine
Tune grading tolerance and feedback wording here
"""

# ===============================
# STROKE GRADING
# ===============================

# Resampling resolution (number of points per stroke)
RESAMPLE_POINTS = 50

# Return strokes with <= RESAMPLE_POINTS points unchanged instead of
# interpolating them up to exactly RESAMPLE_POINTS
RESAMPLE_PRESERVE_SHORT = False

# Minimum bounding box width/height used when normalizing (input units)
MIN_BOX_EXTENT = 1.0

# Also score the student stroke against the reversed reference
ALLOW_REVERSE_STROKES = False

# Similarity needed to earn a point on a tracing exercise (0-100)
TRACE_PASS_SCORE = 80

# ===============================
# WORD GRADING
# ===============================

# Edit-distance similarity a response must exceed to count as a match
WORD_SIMILARITY_THRESHOLD = 0.75

# Points per correct spoken word
WORD_POINTS = 10

# ===============================
# FEEDBACK
# ===============================

# Minimum similarity for each tier, checked top to bottom
FEEDBACK_TIERS = {
    "perfect": 90,
    "great": 80,
    "good": 70,
    "getting_there": 50,
    "keep_practicing": 0,
}

FEEDBACK_MESSAGES = {
    "perfect": "Perfect! Amazing tracing!",
    "great": "Great job! Very close!",
    "good": "Good work! Keep it up!",
    "getting_there": "Getting there! Try again!",
    "keep_practicing": "Keep practicing!",
}

# ===============================
# DEBUG & DEVELOPMENT
# ===============================

# Verbose grading logs in the demos
DEBUG_MODE = False

# Application name (for display)
APP_NAME = "Response Evaluation Engine"
APP_VERSION = "1.0.0"


def get_config(key: str, default=None):
    """Look up a setting by dotted key, e.g. "FEEDBACK_MESSAGES.great"."""
    name, _, rest = key.partition(".")
    value = globals().get(name, default)
    if not rest:
        return value

    for part in rest.split("."):
        if not isinstance(value, dict) or part not in value:
            return default
        value = value[part]
    return value


if __name__ == "__main__":
    print(f"{APP_NAME} Configuration")
    print("=" * 50)
    print(f"Resample points: {RESAMPLE_POINTS}")
    print(f"Preserve short strokes: {RESAMPLE_PRESERVE_SHORT}")
    print(f"Allow reversed strokes: {ALLOW_REVERSE_STROKES}")
    print(f"Trace pass score: {TRACE_PASS_SCORE}")
    print(f"Word similarity threshold: {WORD_SIMILARITY_THRESHOLD}")
    print(f"Debug Mode: {DEBUG_MODE}")
