from datetime import datetime
from typing import List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

ANSWERS_PER_QUESTION = 4

QUIZ_TEXT_FIELDS = ("title", "course", "topic")
QUIZ_REQUIRED_FIELDS = QUIZ_TEXT_FIELDS + ("dueDate",)

ANNOUNCEMENT_FIELDS = ("name", "course", "content", "img")


class Answer(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: StrictStr
    isCorrect: StrictBool


class Question(BaseModel):
    """A quiz question. Owned by its quiz; ``answers`` always holds
    ``ANSWERS_PER_QUESTION`` entries once it has passed validation."""

    model_config = ConfigDict(extra="ignore")

    description: str
    answers: List[Answer]


class QuizFields(BaseModel):
    title: str
    course: str
    topic: str
    dueDate: datetime
    questions: List[Question] = Field(default_factory=list)


class GradeResult(BaseModel):
    score: int
    totalQuestions: int
    percentage: Union[int, float]
    status: Literal["pass", "fail"]


class AnnouncementFields(BaseModel):
    name: str
    course: str
    content: str
    img: str
