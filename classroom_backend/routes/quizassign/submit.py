import logging

from flask import Blueprint, jsonify, request

from classroom_backend.errors import ValidationError
from classroom_backend.extensions import quiz_repository
from classroom_backend.grading import grade

router = Blueprint('submit', __name__)

logger = logging.getLogger(__name__)


@router.route("/quizzes/<quiz_id>/submit", methods=["POST"])
def submit_quiz(quiz_id):
    quiz = quiz_repository().get(quiz_id)

    answers = request.get_json(silent=True)
    if not isinstance(answers, list):
        raise ValidationError("Submission must be an array of answers")

    result = grade(quiz, answers)
    logger.info(
        "Graded quiz %s: %s/%s (%s)", quiz_id, result.score, result.totalQuestions, result.status
    )
    return jsonify(result.model_dump())
