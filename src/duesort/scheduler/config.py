"""Configuration classes for the scheduling system."""

from pydantic import BaseModel, Field


class SchedulerConfig(BaseModel):
    """Configuration for the deadline-priority scheduler."""

    # Advisory pass projecting completion dates against due dates
    check_feasibility: bool = False
    working_hours_per_day: float = Field(default=8.0, gt=0)

    # Defaults used when converting stored tasks that lack an estimate or due date
    default_estimated_hours: float = Field(default=1.0, gt=0)
    default_due_in_days: int = Field(default=7, ge=0)
