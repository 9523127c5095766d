"""Schémas Pydantic du forum communautaire."""

from typing import Annotated

from pydantic import BaseModel, StringConstraints


class ForumPostForm(BaseModel):
    title: Annotated[str, StringConstraints(min_length=5, max_length=200, strip_whitespace=True)]
    content: Annotated[
        str, StringConstraints(min_length=10, max_length=5000, strip_whitespace=True)
    ]
    category: Annotated[str, StringConstraints(max_length=50, strip_whitespace=True)] | None = None


class ForumReplyForm(BaseModel):
    content: Annotated[str, StringConstraints(min_length=1, max_length=2000, strip_whitespace=True)]
