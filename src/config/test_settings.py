"""Settings for the pytest run.

``SECRET_KEY`` has no default in ``config.settings``; provide a throwaway
one so the suite runs without a ``.env`` file.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-only-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")

from config.settings import *  # noqa: E402,F401,F403
