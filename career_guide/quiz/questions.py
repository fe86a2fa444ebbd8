"""
Базовые вопросы фазы 1 (одинаковые для всех пользователей)
"""
from career_guide.schemas.quiz import QuizOption, QuizQuestion


def _question(text: str, *options: tuple) -> QuizQuestion:
    return QuizQuestion(
        question=text,
        type="single",
        options=[QuizOption(value=value, label=label) for value, label in options],
    )


PHASE1_QUESTIONS = (
    _question(
        "What is your current education level?",
        ("high_school", "High School"),
        ("bachelors", "Bachelor's Degree"),
        ("masters", "Master's Degree"),
        ("phd", "PhD"),
        ("other", "Other / Self-taught"),
    ),
    _question(
        "Which work style appeals to you most?",
        ("remote", "Remote — work from anywhere"),
        ("office", "Office — structured environment"),
        ("hybrid", "Hybrid — mix of both"),
        ("fieldwork", "Fieldwork — hands-on in the real world"),
    ),
    _question(
        "Which domain interests you the most?",
        ("technology", "Technology & Engineering"),
        ("business", "Business & Finance"),
        ("healthcare", "Healthcare & Life Sciences"),
        ("creative", "Creative Arts & Design"),
        ("science", "Science & Research"),
        ("education", "Education & Social Impact"),
    ),
    _question(
        "How do you prefer to solve problems?",
        ("analytical", "Analytically with data and logic"),
        ("creative", "Creatively with new ideas"),
        ("collaborative", "Collaboratively with people"),
        ("hands_on", "Hands-on by building things"),
    ),
    _question(
        "What matters most to you in a career?",
        ("salary", "High salary and financial growth"),
        ("balance", "Work-life balance"),
        ("impact", "Social impact and meaning"),
        ("learning", "Continuous learning and challenges"),
        ("security", "Job security and stability"),
    ),
)

TOTAL_PHASE1 = len(PHASE1_QUESTIONS)  # 5
TOTAL_PHASE2 = 10
TOTAL_QUESTIONS = TOTAL_PHASE1 + TOTAL_PHASE2  # 15
