from sqlalchemy import Column, Integer, String, Text, DateTime, Index
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Project(Base):
    __tablename__ = 'projects'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    # Plain reference column: deleting the user leaves the id behind
    created_by_id = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)

    created_by = relationship(
        "User",
        primaryjoin="foreign(Project.created_by_id) == User.id",
        viewonly=True,
        lazy="joined",
    )

    __table_args__ = (
        Index('idx_projects_created_by_id', 'created_by_id'),
        {'sqlite_autoincrement': True},
    )
