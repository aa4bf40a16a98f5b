"""Pydantic schemas for schedule requests and responses."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import ScheduleResult, ScheduleTask, parse_dependency_text


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TaskScheduleSchema(_CamelModel):
    """Schema for one task in a schedule request."""

    title: str = Field(min_length=1, max_length=200)
    estimated_hours: float = Field(alias="estimatedHours", ge=0.1, le=1000)
    due_date: datetime = Field(alias="dueDate")
    dependencies: list[str] = Field(default_factory=list)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: Any) -> Any:
        """Trim surrounding whitespace from titles."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("due_date", mode="before")
    @classmethod
    def coerce_date_to_datetime(cls, v: Any) -> Any:
        """Treat bare dates (YAML dates or YYYY-MM-DD strings) as midnight."""
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime.combine(v, time.min)
        if isinstance(v, str) and len(v.strip()) == len("YYYY-MM-DD"):
            try:
                return datetime.combine(date.fromisoformat(v.strip()), time.min)
            except ValueError:
                return v
        return v

    @field_validator("dependencies", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Accept None, a single title, free text, or a list of titles."""
        if v is None:
            return []
        if isinstance(v, str):
            return parse_dependency_text(v)
        if isinstance(v, list):
            return [str(item).strip() for item in v if str(item).strip()]  # type: ignore[misc]
        return [str(v)]

    def to_task(self) -> ScheduleTask:
        return ScheduleTask(
            title=self.title,
            estimated_hours=self.estimated_hours,
            due_date=self.due_date,
            dependencies=tuple(self.dependencies),
        )


class ScheduleRequestSchema(_CamelModel):
    """Schema for a whole schedule request."""

    tasks: list[TaskScheduleSchema] = Field(default_factory=list)

    @field_validator("tasks", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        if v is None:
            return []
        return v

    def to_tasks(self) -> list[ScheduleTask]:
        return [task.to_task() for task in self.tasks]


class ScheduleResponseSchema(_CamelModel):
    """Schema for the response returned to API callers."""

    recommended_order: list[str] = Field(default_factory=list, alias="recommendedOrder")
    is_valid: bool = Field(default=True, alias="isValid")
    message: str | None = None
    error_code: str | None = Field(default=None, alias="errorCode")
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ScheduleResult) -> ScheduleResponseSchema:
        return cls(
            recommended_order=list(result.recommended_order),
            is_valid=result.is_valid,
            message=result.message,
            error_code=result.error.value if result.error else None,
            warnings=list(result.warnings),
        )
