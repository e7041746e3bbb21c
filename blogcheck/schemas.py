from enum import Enum

from pydantic import BaseModel
from pydantic import Field

class SubmitType(str, Enum):
    """Submission intent carried by the blog post form."""
    create = "create"
    update = "update"

class BlogPostFormData(BaseModel):
    """Structured format for a submitted blog post form."""
    blogId: str = Field(..., description="Identifier of the blog post.")
    blogTitle: str = Field(..., description="The title of the blog post.")
    blogText: str = Field(..., description="The content of the blog post.")
    submitType: SubmitType = Field(default=SubmitType.create, description="Whether the post is created or updated.")
