"""
End-of-term rubric.

The five fixed evaluation prompts scored by students together with their
industry supervisor, and the labels shown for each score.
"""

END_OF_TERM_QUESTIONS = (
    "awareness of a range of issues associated with professional practice",
    "professional and personal skills",
    "practical skills and theoretical knowledge into an IT industry context",
    "understanding of business processes and organisational structures",
    "professional contacts and networks within the IT industry",
)

SCORE_DESCRIPTIONS = {
    5: "I can teach and share this to my colleagues",
    4: "I know more than enough",
    3: "I'm happy with what I know",
    2: "I want to learn more about this",
    1: "I like to have help on this",
}

MIN_SCORE = 1
MAX_SCORE = 5


def score_description(score):
    """Return the rubric label for a score, or an empty string if out of range."""
    return SCORE_DESCRIPTIONS.get(score, "")
