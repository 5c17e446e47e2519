CHAT_COMPLETION_MODEL = "gpt-4o-mini"

RECOMMENDATION_TEMPERATURE = 0.8
PARSE_REQUEST_TEMPERATURE = 0.3

# Rating thresholds on the 1-5 preference scale
LIKED_MIN_RATING = 4
DISLIKED_MAX_RATING = 2

MAX_REJECTED_IN_PROMPT = 10
MAX_WATCHED_IN_PROMPT = 20

PROFILE_BASED_PROMPT = "profile-based"

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72  # bcrypt input limit
