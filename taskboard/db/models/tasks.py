from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Index, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base, now_utc
from .enums import TaskStatus, Priority, check_in


class Task(Base):
    __tablename__ = 'tasks'
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=TaskStatus.TODO.value)
    priority = Column(String(20), nullable=False, default=Priority.MEDIUM.value)
    due_date = Column(Date, nullable=True)
    assigned_to_id = Column(Integer, nullable=True)
    project_id = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)

    assigned_to = relationship(
        "User",
        primaryjoin="foreign(Task.assigned_to_id) == User.id",
        viewonly=True,
        lazy="joined",
    )
    project = relationship(
        "Project",
        primaryjoin="foreign(Task.project_id) == Project.id",
        viewonly=True,
        lazy="joined",
    )

    __table_args__ = (
        Index('idx_tasks_status_priority', 'status', 'priority'),
        Index('idx_tasks_assigned_to_id', 'assigned_to_id'),
        Index('idx_tasks_project_id', 'project_id'),
        CheckConstraint(check_in('status', TaskStatus), name='ck_tasks_status'),
        CheckConstraint(check_in('priority', Priority), name='ck_tasks_priority'),
        {'sqlite_autoincrement': True},
    )
