# Ensure 'backend/' is on sys.path so 'import talent_portal' works
# even when pytest is started from the repo root.
import os
from pathlib import Path
import sys

_BACKEND_ROOT = Path(__file__).resolve().parent  # <repo>/backend
if str(_BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(_BACKEND_ROOT))

# Settings are read at import time; pin test-safe values before the app loads.
os.environ.setdefault("CI", "1")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["GEOCODING_PROVIDER"] = "mock"
os.environ["EMAIL_PROVIDER"] = "console"
os.environ["ZIP_RADIUS_API_KEY"] = ""
os.environ.pop("RESEND_API_KEY", None)

# Alembic migrations are exercised against a live database only
collect_ignore_glob = [
    "alembic/*",
]
