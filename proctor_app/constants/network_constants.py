"""Network configuration constants for the proctoring client."""

DEFAULT_API_BASE_URL: str = "http://localhost:8080"
API_TIMEOUT_SECONDS: float = 15.0

SANDBOX_HOST: str = "127.0.0.1"
SANDBOX_PORT: int = 8080

JOB_POSTS_PATH: str = "/api/job-posts"
QUIZZES_PATH: str = "/api/quizzes"
