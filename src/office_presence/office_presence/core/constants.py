"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SESSION_TOKEN_TTL_DAYS = 30
DISPLAYED_WEEKDAYS = 5
UNKNOWN_PERSON_NAME = "Unknown"

FORKABLE_BASE_URL = "https://forkable.com"
FORKABLE_GRAPHQL_PATH = "/api/v2/graphql"
FORKABLE_DELIVERIES_PATH = "/api/v2/mc/admin/deliveries"
FORKABLE_SESSION_COOKIE_NAME = "_easyorder_session"
DEFAULT_UPSTREAM_TIMEOUT_SECONDS = 30.0

GOOGLE_AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"
GOOGLE_SCOPES = ("openid", "email", "profile")
