from sqlalchemy import Column, Integer, String, Text, DateTime, Index, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base, now_utc
from .enums import EntityStatus, check_in


class Entity(Base):
    """Generic template resource: a named, described row with a status."""
    __tablename__ = 'entities'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=EntityStatus.ACTIVE.value)
    owner_id = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)

    owner = relationship(
        "User",
        primaryjoin="foreign(Entity.owner_id) == User.id",
        viewonly=True,
        lazy="joined",
    )

    __table_args__ = (
        Index('idx_entities_status', 'status'),
        Index('idx_entities_created_at', 'created_at'),
        CheckConstraint(check_in('status', EntityStatus), name='ck_entities_status'),
        {'sqlite_autoincrement': True},
    )
