# __init__.py
from jobnet.data.sample_jobs import SAMPLE_EMPLOYER_EMAIL, SAMPLE_EMPLOYER_PASSWORD, SampleJob, load_sample_jobs
from jobnet.data.skills import COMMON_SKILLS

__all__ = [
    "COMMON_SKILLS",
    "SAMPLE_EMPLOYER_EMAIL",
    "SAMPLE_EMPLOYER_PASSWORD",
    "SampleJob",
    "load_sample_jobs",
]
