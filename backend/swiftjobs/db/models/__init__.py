from swiftjobs.db.models.employer import Employer
from swiftjobs.db.models.job_seeker import JobSeeker
from swiftjobs.db.models.job import Job
from swiftjobs.db.models.match import Match
from swiftjobs.db.models.message import Message

__all__ = [
    "Employer",
    "JobSeeker",
    "Job",
    "Match",
    "Message",
]
