"""In-memory user records API: repository, stats report and FastAPI routes."""
