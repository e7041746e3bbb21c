import re

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

DEFAULT_EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

class ValidationConfig(BaseModel):
    """Config for blog post and email validation bounds."""
    model_config = ConfigDict(extra="forbid")

    title_min_length: int = Field(default=2, ge=0)
    title_max_length: int | None = Field(default=200, ge=0)
    text_min_length: int = Field(default=2, ge=0)
    text_max_length: int | None = Field(default=10000, ge=0)
    email_pattern: str = Field(default=DEFAULT_EMAIL_PATTERN)

    @model_validator(mode="after")
    def check_bounds(self) -> "ValidationConfig":
        for name, low, high in (
            ("title", self.title_min_length, self.title_max_length),
            ("text", self.text_min_length, self.text_max_length),
        ):
            if high is not None and low > high:
                raise ValueError(f"{name} min length {low} exceeds max length {high}")
        try:
            re.compile(self.email_pattern)
        except re.error as e:
            raise ValueError(f"Invalid email pattern: {e}") from e
        return self
