from typing import Any

from pydantic import BaseModel, Field, StrictBool, field_validator


def checkbox_checked(value: Any) -> bool:
    """HTML checkboxes submit "on" when ticked and nothing otherwise."""
    return value == "on"


class TaskIn(BaseModel):
    # extra form keys are ignored (pydantic default)
    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    completed: StrictBool = False

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("description", mode="before")
    @classmethod
    def _blank_description(cls, v):
        if isinstance(v, str):
            return v.strip() or None
        return v
