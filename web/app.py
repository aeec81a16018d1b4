"""Spell checker web service: Flask backend."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

# Ensure project root is on sys.path so `typocheck.*` imports work
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, current_app, jsonify, request

from typocheck.checker import SpellChecker, load_default_dictionary, normalize_query
from typocheck.constants import MAX_REQUEST_BYTES, MAX_WORD_LENGTH
from typocheck.dictionary import VocabularyUnavailable
from typocheck.distance import levenshtein

log = logging.getLogger("typocheck")

# Environment variable naming the words file to serve
WORDS_ENV = "TYPOCHECK_WORDS"


class InvalidRequest(Exception):
    """Malformed request body; reported to the client as HTTP 400."""


def _load_checker() -> SpellChecker:
    path = os.environ.get(WORDS_ENV)
    if path:
        return SpellChecker.from_file(path)
    return load_default_dictionary()


def _parse_limit(data: dict, key: str) -> int | None:
    """Read an optional non-negative integer field from the request body."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidRequest(f"'{key}' must be a non-negative integer")
    return value


def _string_field(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise InvalidRequest(f"'{key}' must be a string")
    if len(value) > MAX_WORD_LENGTH:
        raise InvalidRequest(f"'{key}' is longer than {MAX_WORD_LENGTH} characters")
    return value


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidRequest("Request body must be a JSON object")
    return data


def create_app(checker: SpellChecker | None = None) -> Flask:
    """Build the Flask app around a fully loaded SpellChecker.

    Raises VocabularyUnavailable if no checker is given and the default
    word list can't be loaded, so the service never starts without one.
    """
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = MAX_REQUEST_BYTES
    app.config["CHECKER"] = checker if checker is not None else _load_checker()

    @app.errorhandler(InvalidRequest)
    def bad_request(e: InvalidRequest):
        return jsonify({"error": str(e)}), 400

    @app.route("/")
    def index():
        engine: SpellChecker = current_app.config["CHECKER"]
        return jsonify({"status": "ok", "word_count": engine.word_count})

    @app.route("/check", methods=["POST"])
    def check():
        data = _json_body()
        word = normalize_query(_string_field(data, "word"))
        if not word:
            raise InvalidRequest("No word provided")
        max_distance = _parse_limit(data, "max_distance")
        max_suggestions = _parse_limit(data, "max_suggestions")

        engine: SpellChecker = current_app.config["CHECKER"]
        result = engine.check(word, max_distance, max_suggestions)
        log.info("check %r -> known=%s, %d suggestions",
                 word, result.known, len(result.suggestions))
        return jsonify(result.to_dict())

    @app.route("/distance", methods=["POST"])
    def distance():
        data = _json_body()
        a = _string_field(data, "a")
        b = _string_field(data, "b")
        return jsonify({"a": a, "b": b, "distance": levenshtein(a, b)})

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    try:
        app = create_app()
    except VocabularyUnavailable as e:
        print(f"Error loading dictionary: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Dictionary loaded: {app.config['CHECKER'].word_count} words")
    app.run(debug=True, host="0.0.0.0", port=8080)
