from swiftjobs.api.routes import (
    auth,
    employers,
    health,
    job_seekers,
    jobs,
    matches,
    messages,
)

__all__ = [
    "auth",
    "employers",
    "health",
    "job_seekers",
    "jobs",
    "matches",
    "messages",
]
