from flask import current_app
from flask_cors import CORS

cors = CORS()


def quiz_repository():
    return current_app.extensions["quiz_repository"]


def announcement_repository():
    return current_app.extensions["announcement_repository"]
