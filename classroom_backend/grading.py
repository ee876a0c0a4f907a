import logging

from classroom_backend.models import GradeResult

logger = logging.getLogger(__name__)

PASSING_PERCENTAGE = 70


def _selected_index(entry):
    index = entry.get("selectedAnswerIndex")
    if isinstance(index, bool) or not isinstance(index, int):
        return None
    return index


def grade(quiz, submission):
    """Score a submission against a stored quiz.

    ``submission`` is a list of ``{"questionId", "selectedAnswerIndex"}``
    entries. Entries that are malformed, point at an unknown question, or pick
    an index outside the question's answers are skipped. Every remaining entry
    counts once when the chosen answer is marked correct, so answering the
    same question twice can count twice.
    """
    questions = quiz.get("questions") or []
    total_questions = len(questions)
    questions_by_id = {str(question["_id"]): question for question in questions}

    correct_answers_count = 0
    for entry in submission:
        if not isinstance(entry, dict):
            logger.debug("Skipping non-object submission entry: %r", entry)
            continue

        question_id = entry.get("questionId")
        index = _selected_index(entry)
        if not question_id or index is None:
            logger.debug("Skipping incomplete submission entry: %r", entry)
            continue

        question = questions_by_id.get(str(question_id))
        if question is None:
            logger.debug("Skipping answer for unknown question %s", question_id)
            continue

        answers = question.get("answers") or []
        if not 0 <= index < len(answers):
            logger.debug("Skipping out-of-range index %s for question %s", index, question_id)
            continue

        if answers[index].get("isCorrect") is True:
            correct_answers_count += 1

    percentage = 0
    if total_questions > 0:
        whole, remainder = divmod(correct_answers_count * 100, total_questions)
        percentage = whole if remainder == 0 else correct_answers_count * 100 / total_questions
    status = "pass" if percentage >= PASSING_PERCENTAGE else "fail"

    return GradeResult(
        score=correct_answers_count,
        totalQuestions=total_questions,
        percentage=percentage,
        status=status,
    )
