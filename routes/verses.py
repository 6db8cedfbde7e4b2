# routes/verses.py
from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from schemas.verse_schemas import VerseQuery, VerseRead
import logging

logger = logging.getLogger(__name__)

verses_bp = Blueprint('verses', __name__)


def get_store():
    return current_app.extensions['verse_store']


@verses_bp.route('/verse', methods=['GET'])
def get_verse():
    logger.info(f"Received verse request from {request.remote_addr}: {request.full_path}")
    params = {key: request.args.get(key) for key in ('version', 'book', 'chapter', 'verse')}
    logger.info(f"Params: {params}")

    missing = [key for key, value in params.items() if not value]
    if missing:
        logger.info(f"Missing required parameters: {', '.join(missing)}")
        return jsonify({"error": "Missing required parameters"}), 400

    try:
        query = VerseQuery(**params)
    except ValidationError as e:
        invalid = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        logger.info(f"Invalid verse parameters: {e.errors()}")
        return jsonify({"error": f"Invalid integer parameters: {', '.join(invalid)}"}), 400

    try:
        text = get_store().get_verse_text(query.version, query.book, query.chapter, query.verse)
    except SQLAlchemyError as e:
        logger.error(f"Database error: {e}", exc_info=True)
        return jsonify({"error": "Internal server error"}), 500

    if text is None:
        logger.info(f"Verse not found: {query.book} {query.chapter}:{query.verse}")
        return jsonify({"error": "Verse not found"}), 404

    verse = VerseRead(**query.model_dump(), text=text)
    logger.info(f"Successfully sent response for {query.book} {query.chapter}:{query.verse}")
    return jsonify(verse.model_dump())


@verses_bp.route('/books', methods=['GET'])
def get_books():
    logger.info(f"Received books request from {request.remote_addr}")
    try:
        books = get_store().list_books()
    except SQLAlchemyError as e:
        logger.error(f"Database error: {e}", exc_info=True)
        return jsonify({"error": "Internal server error"}), 500

    logger.info(f"Successfully sent response with {len(books)} books")
    return jsonify(books)
