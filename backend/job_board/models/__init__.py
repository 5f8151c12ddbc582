# MongoDB models
from .job_posting import JobPosting

__all__ = ["JobPosting"]
