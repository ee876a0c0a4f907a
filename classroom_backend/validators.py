"""
Structural checks for quiz payloads.

Rules run in a fixed order and the first failure wins:

1. on create, title/course/topic/dueDate are present and non-empty
2. dueDate parses to a date-time
3. questions, when given, is an array
4. every question has a description and exactly four answers
5. every answer has string ``text`` and boolean ``isCorrect``

Nothing here touches the database.
"""
import logging
from datetime import datetime, timezone

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from classroom_backend.errors import ValidationError
from classroom_backend.models import (
    ANNOUNCEMENT_FIELDS,
    ANSWERS_PER_QUESTION,
    QUIZ_REQUIRED_FIELDS,
    QUIZ_TEXT_FIELDS,
    AnnouncementFields,
    Answer,
    QuizFields,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please provide all required fields: " + ", ".join(QUIZ_REQUIRED_FIELDS)
INVALID_DATE_MESSAGE = (
    "Invalid date format for dueDate. Please use ISO 8601 format (e.g., 2024-03-20T15:00:00Z)"
)
ANNOUNCEMENT_REQUIRED_MESSAGE = "Please provide all required fields: " + ", ".join(ANNOUNCEMENT_FIELDS)
BODY_NOT_OBJECT_MESSAGE = "Request body must be a JSON object"

_datetime_adapter = TypeAdapter(datetime)


def _is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def _clean_text(field, value):
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    if not value.strip():
        raise ValidationError(f"{field} cannot be empty")
    return value.strip()


def _is_numeric_text(value):
    try:
        float(value)
    except ValueError:
        return False
    return True


def _require_object(payload):
    if not isinstance(payload, dict):
        raise ValidationError(BODY_NOT_OBJECT_MESSAGE)


def parse_due_date(value):
    # bool is an int subclass and would otherwise parse as a timestamp
    if isinstance(value, bool):
        raise ValidationError(INVALID_DATE_MESSAGE)
    # timestamps only as JSON numbers, never as numeric text
    if isinstance(value, str) and _is_numeric_text(value):
        raise ValidationError(INVALID_DATE_MESSAGE)
    try:
        parsed = _datetime_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValidationError(INVALID_DATE_MESSAGE) from None
    # naive values are taken as UTC
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        # offset pushes the value outside datetime.min/datetime.max
        raise ValidationError(INVALID_DATE_MESSAGE) from None


def _check_question_shape(index, question):
    label = f"Question {index + 1}"
    if not isinstance(question, dict):
        raise ValidationError(f"{label} must be an object")
    description = question.get("description")
    if _is_blank(description) or not isinstance(description, str):
        raise ValidationError(f"{label}: description is required")
    answers = question.get("answers")
    if not isinstance(answers, list) or len(answers) != ANSWERS_PER_QUESTION:
        raise ValidationError(f"{label}: must have exactly {ANSWERS_PER_QUESTION} answers")


def _check_answer(question_index, answer_index, answer):
    label = f"Question {question_index + 1}, answer {answer_index + 1}"
    if not isinstance(answer, dict):
        raise ValidationError(f"{label} must be an object")
    try:
        return Answer.model_validate(answer).model_dump()
    except PydanticValidationError as exc:
        field = exc.errors()[0]["loc"][0]
        if field == "isCorrect":
            raise ValidationError(f"{label}: isCorrect must be a boolean") from None
        raise ValidationError(f"{label}: text must be a string") from None


def validate_questions(questions):
    """Check rules 3-5 and return the questions reduced to their known fields."""
    if not isinstance(questions, list):
        raise ValidationError("questions must be an array")

    for index, question in enumerate(questions):
        _check_question_shape(index, question)

    normalized = []
    for q_index, question in enumerate(questions):
        answers = [
            _check_answer(q_index, a_index, answer)
            for a_index, answer in enumerate(question["answers"])
        ]
        normalized.append({"description": question["description"], "answers": answers})
    return normalized


def validate_quiz_create(payload):
    """Validate a full quiz payload; return the normalized document fields."""
    _require_object(payload)

    missing = [field for field in QUIZ_REQUIRED_FIELDS if _is_blank(payload.get(field))]
    if missing:
        logger.info("Quiz rejected, missing fields: %s", ", ".join(missing))
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    fields = {field: _clean_text(field, payload[field]) for field in QUIZ_TEXT_FIELDS}
    fields["dueDate"] = parse_due_date(payload["dueDate"])
    fields["questions"] = validate_questions(payload.get("questions", []))

    return QuizFields(**fields).model_dump()


def validate_quiz_update(payload):
    """Validate only the fields present in ``payload``.

    Returns the patch to merge into the stored quiz. Fields that are absent,
    and fields the quiz does not have, are left out.
    """
    _require_object(payload)

    patch = {}
    for field in QUIZ_TEXT_FIELDS:
        if field in payload:
            patch[field] = _clean_text(field, payload[field])
    if "dueDate" in payload:
        patch["dueDate"] = parse_due_date(payload["dueDate"])
    if "questions" in payload:
        patch["questions"] = validate_questions(payload["questions"])
    return patch


def validate_announcement_create(payload):
    _require_object(payload)
    if any(_is_blank(payload.get(field)) for field in ANNOUNCEMENT_FIELDS):
        raise ValidationError(ANNOUNCEMENT_REQUIRED_MESSAGE)
    fields = {field: _clean_text(field, payload[field]) for field in ANNOUNCEMENT_FIELDS}
    return AnnouncementFields(**fields).model_dump()


def validate_announcement_update(payload):
    _require_object(payload)
    # blank values are ignored rather than rejected
    return {
        field: _clean_text(field, payload[field])
        for field in ANNOUNCEMENT_FIELDS
        if not _is_blank(payload.get(field))
    }
