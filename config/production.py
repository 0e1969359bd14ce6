import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

FORKABLE_ADMIN_EMAIL = os.getenv("FORKABLE_ADMIN_EMAIL")
FORKABLE_ADMIN_PASSWORD = os.getenv("FORKABLE_ADMIN_PASSWORD")
FORKABLE_SESSION_COOKIE = os.getenv("FORKABLE_SESSION_COOKIE")
FORKABLE_CLUB_IDS = os.getenv("FORKABLE_CLUB_IDS")
FORKABLE_BASE_URL = os.getenv("FORKABLE_BASE_URL", "https://forkable.com")
FORKABLE_TIMEOUT_SECONDS = float(os.getenv("FORKABLE_TIMEOUT_SECONDS", "30"))

GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID")
GOOGLE_CLIENT_SECRET = os.getenv("GOOGLE_CLIENT_SECRET")
ALLOWED_EMAIL_DOMAIN = os.getenv("ALLOWED_EMAIL_DOMAIN")

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))
SESSION_COOKIE_SECURE = bool(int(os.getenv("SESSION_COOKIE_SECURE", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEBUG = False
