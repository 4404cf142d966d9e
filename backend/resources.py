# This file contains the resources for the Flask-Restful app
# 2 Resources to be defined: wordslist, home

from flask import current_app
from flask_restful import Resource
from http import HTTPStatus
from data_service import DataAccessError
import logging

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


def get_data_service():
    # Registered on the app in register_extensions
    return current_app.extensions['data_service']


def format_word_row(row: dict) -> dict:
    """Project a words row onto the public shape, renaming category_id to categoryId."""
    return {
        'id': row['id'],
        'word': row['word'],
        'categoryId': row['category_id'],
    }


def list_approved_words(data_service) -> list[dict]:
    """
    Return every approved word that belongs to an approved category, sorted by word text.

    Two sequential selects: approved category ids first, then approved words whose
    category_id is in that set. When no category is approved the words table is
    not queried at all.

    Raises:
        DataAccessError: either select failed. The second select is never issued
            when the first one fails.
    """
    categories = data_service.select('categories', columns='id', eq={'approved': True})
    category_ids = [c['id'] for c in categories]
    logger.debug(f"{len(category_ids)} approved categories")

    if len(category_ids) == 0:
        return []

    rows = data_service.select(
        'words',
        columns='*',
        eq={'approved': True},
        in_={'category_id': category_ids},
        order_by='word',
    )
    words = [format_word_row(row) for row in rows]
    logger.debug(f"{len(words)} approved words returned")
    return words


class WordListResource(Resource):

    def get(self):
        try:
            words = list_approved_words(get_data_service())
        except DataAccessError as e:
            logger.error(f"Error fetching approved words: {e.message}")
            return {"error": e.message}, HTTPStatus.INTERNAL_SERVER_ERROR
        except Exception:
            logger.exception("Error listing approved words")
            return {"error": GENERIC_ERROR_MESSAGE}, HTTPStatus.INTERNAL_SERVER_ERROR

        return {"words": words}, HTTPStatus.OK


class HomeResource(Resource):
    def get(self):
        return {"message": "Approved words API is running"}, HTTPStatus.OK
