"""Shopping Orders FastAPI application.

Serves the order admission and query pipelines over HTTP. Settings are read
from the environment once, here, and passed down explicitly.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from orders.api.factory import create_app
from orders.config import Settings
from orders.domain import orders

# PROTEAN_ENV selects the Protean config overlay, e.g. "test" or "production"
orders.init()

settings = Settings.from_env()

app = create_app(settings)
