from sqlalchemy import Column, String, Text, Integer, DateTime, Enum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func
import uuid
from assessment.db.base import Base

import enum


class ChallengeDifficulty(enum.Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


class ChallengeCategory(enum.Enum):
    rls = "rls"
    storage = "storage"
    auth = "auth"
    queries = "queries"
    migrations = "migrations"
    other = "other"


class Challenge(Base):
    __tablename__ = "challenges"
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    challenge_number = Column(Integer, nullable=False, unique=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    difficulty = Column(
        Enum(ChallengeDifficulty, name="challenge_difficulty", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    category = Column(
        Enum(ChallengeCategory, name="challenge_category", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        server_default=ChallengeCategory.other.value,
    )
    points = Column(Integer, nullable=False, server_default="10")
    hint = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        return f"<Challenge #{self.challenge_number} {self.title!r}>"
