from flask import Blueprint, jsonify, request

from classroom_backend.authorization import requires_authorization
from classroom_backend.extensions import announcement_repository
from classroom_backend.repositories import serialize
from classroom_backend.validators import validate_announcement_create, validate_announcement_update

router = Blueprint('announcements', __name__)


@router.route("/announcements", methods=["GET"])
def get_announcements():
    # newest first
    return jsonify(serialize(announcement_repository().find_all()))


@router.route("/announcements/<announcement_id>", methods=["GET"])
def get_announcement(announcement_id):
    return jsonify(serialize(announcement_repository().get(announcement_id)))


@router.route("/announcements", methods=["POST"])
@requires_authorization("announcement:create")
def create_announcement():
    fields = validate_announcement_create(request.get_json(silent=True))
    announcement = announcement_repository().create(fields)
    return jsonify(serialize(announcement)), 201


@router.route("/announcements/<announcement_id>", methods=["PUT"])
@requires_authorization("announcement:update")
def update_announcement(announcement_id):
    fields = validate_announcement_update(request.get_json(silent=True))
    announcement = announcement_repository().update(announcement_id, fields)
    return jsonify(serialize(announcement))


@router.route("/announcements/<announcement_id>", methods=["DELETE"])
@requires_authorization("announcement:delete")
def delete_announcement(announcement_id):
    announcement_repository().delete(announcement_id)
    return jsonify({"message": "Announcement removed"})
