import os

DATABASE_URL = os.environ.get("GYMTRACK_DATABASE_URL", "sqlite+aiosqlite:///gymtrack.db")

LOG_LEVEL = os.environ.get("GYMTRACK_LOG_LEVEL", "INFO").upper()

# Gap between two exercise logs above which the grouper starts a new session
SESSION_GAP_MINUTES = int(os.environ.get("GYMTRACK_SESSION_GAP_MINUTES", "120"))

DEFAULT_WORKOUTS_PER_WEEK = min(7, max(1, int(os.environ.get("GYMTRACK_DEFAULT_WORKOUTS_PER_WEEK", "4"))))
