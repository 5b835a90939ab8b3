"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "ProctorQt Assessment"
LOADING_MESSAGE: str = "Preparing quiz questions..."

NO_QUIZ_TITLE: str = "No Quiz Available"
NO_QUIZ_MESSAGE: str = "Could not find a quiz for the selected job's skills. Please try another job."
LOAD_ERROR_TEMPLATE: str = "Quiz Error: {message}"

RULES_HEADING: str = "Quiz Rules & Disqualification"
RULES: tuple[str, ...] = (
    "<b>Single Attempt Only:</b> You are allowed to attempt this test <b>only once</b>.",
    "<b>No Tab or Window Switching:</b> Leaving the test window, even once, results in disqualification.",
    "<b>Fullscreen Mode is Mandatory:</b> Exiting fullscreen at any point results in disqualification.",
    "<b>No Notifications or Pop-ups:</b> Disable notifications before starting; interruptions that take focus disqualify you.",
    "<b>Single Device Usage:</b> Use only one device for the whole test.",
    "<b>No External Applications or Websites:</b> Other applications, AI tools and websites are forbidden.",
    "<b>Do Not Close or Reload:</b> Closing the quiz window is treated as a violation.",
)
RULES_CONSENT_LABEL: str = "I agree to start the quiz and understand the rules."

BUTTON_START: str = "Start Test"
BUTTON_PREVIOUS: str = "Previous"
BUTTON_NEXT: str = "Next"
BUTTON_SUBMIT: str = "Submit Quiz"
BUTTON_SUBMITTING: str = "Submitting..."
BUTTON_RETRY: str = "Retry"
BUTTON_BACK: str = "Go Back"
BUTTON_BROWSE_REFERRALS: str = "Browse Referrals"
BUTTON_BACK_TO_REFERRALS: str = "Back to Referrals"
BUTTON_HISTORY: str = "Assessment History"

PROGRESS_TEMPLATE: str = "{current} of {total}"
ANSWERED_TEMPLATE: str = "{answered} of {total} answered"
PASSING_BADGE_TEMPLATE: str = "{percent}% to pass"

RESULT_PASSED_TITLE: str = "Congratulations!"
RESULT_COMPLETED_TITLE: str = "Quiz Completed"
RESULT_PASSED_MESSAGE: str = "You passed the quiz!"
RESULT_FAILED_TEMPLATE: str = "You need {percent}% to pass"

LEAVE_CONFIRM_TITLE: str = "Leave quiz?"
LEAVE_CONFIRM_MESSAGE: str = (
    "Closing the quiz window ends your only attempt and counts as a disqualification. Leave anyway?"
)

INVALID_SESSION_TITLE: str = "Invalid Quiz Session"
INVALID_SESSION_MESSAGE: str = "You cannot access this quiz without a valid session token."
DISQUALIFIED_TITLE: str = "Quiz Disqualified"
DISQUALIFIED_MESSAGE: str = (
    "You were disqualified for leaving the fullscreen quiz window or reloading the page."
)
SUBMISSION_FAILED_TITLE: str = "Quiz Submission Failed"
HISTORY_FAILED_TITLE: str = "Assessment History Unavailable"
HISTORY_DIALOG_TITLE: str = "Assessment History"
HISTORY_EMPTY_MESSAGE: str = "You have not taken any assessments yet."
HISTORY_COLUMNS: tuple[str, ...] = ("Job", "Score", "Result", "Status", "Submitted")

DETAILS_HEADING: str = "Quiz Details"
DETAILS_QUESTIONS_TEMPLATE: str = "Questions: {count}"
DETAILS_TIME_TEMPLATE: str = "Time limit: {minutes} minutes"
DETAILS_PASSING_TEMPLATE: str = "Passing score: {percent}%"
SKILLS_HEADING: str = "Skills Tested"
RESULT_SCORE_TEMPLATE: str = "Your score: {score}%"
RESULT_COUNTS_TEMPLATE: str = "Correct: {correct}    Incorrect: {incorrect}    Skipped: {skipped}"
QUESTION_NUMBER_TEMPLATE: str = "Question {number}"

REFERRALS_TITLE: str = "Quiz Closed"
REFERRALS_MESSAGE: str = "You have left the assessment. Return to the referrals listing to continue."
BUTTON_CLOSE: str = "Close"
