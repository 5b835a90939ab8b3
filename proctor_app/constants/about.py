"""Static metadata describing ProctorQt."""

APP_NAME = "ProctorQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "ProctorQt is the candidate client for job-linked skill assessments. "
    "Quizzes run fullscreen, once per candidate, with a countdown and automatic "
    "disqualification when the quiz window loses focus."
)
