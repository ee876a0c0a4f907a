import logging
from datetime import datetime, timezone
from functools import wraps

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from classroom_backend.errors import NotFoundError, PersistenceFault

logger = logging.getLogger(__name__)


def _utcnow():
    return datetime.now(timezone.utc)


def _to_object_id(document_id):
    if isinstance(document_id, ObjectId):
        return document_id
    if isinstance(document_id, str) and ObjectId.is_valid(document_id):
        return ObjectId(document_id)
    return None


def _format_datetime(value):
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def serialize(value):
    """Make a stored document JSON friendly (ObjectId -> str, datetime -> ISO)."""
    if isinstance(value, dict):
        return {key: serialize(item) for key, item in value.items()}
    if isinstance(value, list):
        return [serialize(item) for item in value]
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return _format_datetime(value)
    return value


def store_operation(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PyMongoError as e:
            raise PersistenceFault(f"{func.__qualname__} failed: {e}") from e
    return wrapper


class DocumentRepository:
    """CRUD over one collection with createdAt/updatedAt timestamps."""

    sort_field = "createdAt"
    sort_direction = DESCENDING
    not_found_message = "Document not found"

    def __init__(self, collection):
        self.collection = collection

    def _prepare(self, fields):
        """Hook for subclasses to fill in store-assigned values."""
        return fields

    def _object_id_or_404(self, document_id):
        object_id = _to_object_id(document_id)
        if object_id is None:
            raise NotFoundError(self.not_found_message)
        return object_id

    @store_operation
    def create(self, fields):
        now = _utcnow()
        document = self._prepare(dict(fields))
        document["createdAt"] = now
        document["updatedAt"] = now
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info("Created %s %s", self.collection.name, result.inserted_id)
        return document

    @store_operation
    def find_all(self):
        return list(self.collection.find({}).sort(self.sort_field, self.sort_direction))

    @store_operation
    def get(self, document_id):
        document = self.collection.find_one({"_id": self._object_id_or_404(document_id)})
        if document is None:
            raise NotFoundError(self.not_found_message)
        return document

    @store_operation
    def update(self, document_id, patch):
        """Merge ``patch`` into the stored document and return the result.

        Fields missing from the patch keep their stored values.
        """
        object_id = self._object_id_or_404(document_id)
        self.get(object_id)

        changes = self._prepare(dict(patch))
        changes["updatedAt"] = _utcnow()
        document = self.collection.find_one_and_update(
            {"_id": object_id},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        # removed between the existence check and the write
        if document is None:
            raise NotFoundError(self.not_found_message)
        return document

    @store_operation
    def delete(self, document_id):
        object_id = self._object_id_or_404(document_id)
        self.get(object_id)
        result = self.collection.delete_one({"_id": object_id})
        if result.deleted_count == 0:
            raise NotFoundError(self.not_found_message)
        logger.info("Deleted %s %s", self.collection.name, object_id)


class QuizRepository(DocumentRepository):
    sort_field = "dueDate"
    sort_direction = ASCENDING
    not_found_message = "Quiz not found"

    def _prepare(self, fields):
        # Questions and answers are embedded; each gets its own id on write.
        if "questions" in fields:
            fields["questions"] = [
                {
                    "_id": ObjectId(),
                    "description": question["description"],
                    "answers": [
                        {"_id": ObjectId(), "text": answer["text"], "isCorrect": answer["isCorrect"]}
                        for answer in question["answers"]
                    ],
                }
                for question in fields["questions"]
            ]
        return fields


class AnnouncementRepository(DocumentRepository):
    not_found_message = "Announcement not found"
