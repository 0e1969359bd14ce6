SECRET_KEY = "test-secret"

FORKABLE_ADMIN_EMAIL = "admin@example.com"
FORKABLE_ADMIN_PASSWORD = "secret"
FORKABLE_SESSION_COOKIE = None
FORKABLE_CLUB_IDS = "101,202"
FORKABLE_BASE_URL = "https://forkable.test"
FORKABLE_TIMEOUT_SECONDS = 5.0

GOOGLE_CLIENT_ID = "test-client-id"
GOOGLE_CLIENT_SECRET = "test-client-secret"
ALLOWED_EMAIL_DOMAIN = "example.com"

SESSION_DAYS = 1
SESSION_COOKIE_SECURE = False

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True
