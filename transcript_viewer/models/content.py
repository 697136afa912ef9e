"""Summary and quiz models returned by the backend"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class SummaryData(BaseModel):
    """Summary payload"""

    model_config = ConfigDict(frozen=True)

    summary: Optional[str] = Field(None, description="Generated summary text")
    title: Optional[str] = Field(None, description="Video title, when the backend includes it")


class QuizQuestion(BaseModel):
    """One multiple-choice question"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question: str = Field(..., description="Question text")
    options: List[str] = Field(default_factory=list, description="Answer options")
    correct_answer: int = Field(..., alias="correctAnswer", description="Index of the correct option")


class Quiz(BaseModel):
    """Quiz generated for a video"""

    model_config = ConfigDict(frozen=True)

    questions: List[QuizQuestion] = Field(default_factory=list, description="Quiz questions")
