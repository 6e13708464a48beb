class ResponseMessages:
    """Standard API response messages"""

    RSVP_SUBMITTED = "RSVP submitted successfully"
    NOT_ONBOARDED = "Wedding website has not been set up yet"


# Application Constants
class AppConstants:
    # Validation Limits
    MAX_EVENT_NAME_LENGTH = 50
    MAX_TAG_NAME_LENGTH = 20
    MAX_TAGS_PER_GUEST = 10
    MIN_OPTIONS_PER_QUESTION = 2
    MIN_SEARCH_LENGTH = 2

    # Onboarding
    WEDDING_DAY_EVENT_NAME = "Wedding Day"
    DEFAULT_GENERAL_QUESTIONS = [
        "Will you be bringing any children under the age of 10?",
        "Send a note to the couple?",
    ]
    DEFAULT_GUEST_TAGS = [
        {"name": "Family", "color": "#3b82f6"},
        {"name": "MutualFriends", "color": "#10b981"},
        {"name": "Coworkers", "color": "#8b5cf6"},
        {"name": "Plus One", "color": "#f59e0b"},
    ]

    # Patterns
    HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"
    SUB_URL_PATTERN = r"^\w+$"
