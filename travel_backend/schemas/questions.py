"""
Schemas for the preference question catalog served by GET /api/questions.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class QuestionType(str, Enum):
    """How the frontend should render the answer input."""
    TEXT = "text"
    MULTIPLE = "multiple"


class Question(BaseModel):
    """A single travel-preference question with its suggested options."""
    id: int = Field(..., description="Stable question id, 1-based", examples=[1])
    question: str = Field(..., description="Prompt text shown to the user")
    type: QuestionType = Field(..., description="Input type: single 'text' or 'multiple' choice")
    options: List[str] = Field(default_factory=list, description="Suggested answers")
