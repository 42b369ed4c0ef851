# Import all models here so Alembic can discover them
from assessment.db.base import Base

from assessment.features.challenges.models import Challenge
from assessment.features.candidates.models import Candidate
from assessment.features.submissions.models import Submission

__all__ = [
    "Base",
    "Challenge",
    "Candidate",
    "Submission",
]
