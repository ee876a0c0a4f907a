from flask import Blueprint, jsonify, request

from classroom_backend.authorization import requires_authorization
from classroom_backend.extensions import quiz_repository
from classroom_backend.repositories import serialize
from classroom_backend.validators import validate_quiz_create, validate_quiz_update

router = Blueprint('quizzes', __name__)


@router.route("/quizzes", methods=["GET"])
def get_quizzes():
    quizzes = quiz_repository().find_all()
    return jsonify(serialize(quizzes))


@router.route("/quizzes/<quiz_id>", methods=["GET"])
def get_quiz(quiz_id):
    return jsonify(serialize(quiz_repository().get(quiz_id)))


@router.route("/quizzes", methods=["POST"])
@requires_authorization("quiz:create")
def create_quiz():
    fields = validate_quiz_create(request.get_json(silent=True))
    quiz = quiz_repository().create(fields)
    return jsonify(serialize(quiz)), 201


@router.route("/quizzes/<quiz_id>", methods=["PUT"])
@requires_authorization("quiz:update")
def update_quiz(quiz_id):
    patch = validate_quiz_update(request.get_json(silent=True))
    quiz = quiz_repository().update(quiz_id, patch)
    return jsonify(serialize(quiz))


@router.route("/quizzes/<quiz_id>", methods=["DELETE"])
@requires_authorization("quiz:delete")
def delete_quiz(quiz_id):
    quiz_repository().delete(quiz_id)
    return jsonify({"message": "Quiz removed"})
