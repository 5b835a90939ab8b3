"""Quiz-related constants shared across UI and core layers."""

PASSING_SCORE_PERCENT: int = 70
MINUTES_PER_QUESTION: float = 0.2
BANK_SAMPLE_LIMIT: int = 10
OPTIONS_PER_QUESTION: int = 4
QUIZ_CATEGORY: str = "Job Specific"
QUIZ_DESCRIPTION: str = "Test your skills for this job."

SESSION_TOKEN_KEY: str = "quizSessionToken"
REFERRALS_ROUTE: str = "/referrals"
TICK_INTERVAL_MS: int = 1000
