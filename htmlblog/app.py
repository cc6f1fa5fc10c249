from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from flask import Blueprint, Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from . import config
from .auth import check_password, issue_token, token_required
from .errors import BlogError, InvalidCredential, InvalidInput
from .store import PostStore

logger = logging.getLogger(__name__)

api = Blueprint("api", __name__)


def get_store() -> PostStore:
    return current_app.extensions["post_store"]


def json_body() -> dict:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


@api.route("/login", methods=["POST"])
def login():
    password = json_body().get("password")
    if not password or not isinstance(password, str):
        raise InvalidInput("Password required")
    try:
        check_password(password, current_app.config["PASSWORD_HASH"])
    except InvalidCredential:
        logger.warning("Rejected login from %s", request.remote_addr)
        raise
    return jsonify({"token": issue_token()})


@api.route("/posts")
@token_required
def list_posts():
    return jsonify(get_store().list())


@api.route("/posts/<slug>")
@token_required
def get_post(slug: str):
    return jsonify(get_store().get(slug))


@api.route("/posts", methods=["POST"])
@token_required
def create_post():
    data = json_body()
    created = get_store().create(
        data.get("slug"), data.get("title"), data.get("date"), data.get("body")
    )
    return jsonify(created), 201


@api.route("/posts/<slug>", methods=["PUT"])
@token_required
def update_post(slug: str):
    data = json_body()
    updated = get_store().update(slug, data.get("title"), data.get("date"), data.get("body"))
    return jsonify(updated)


@api.route("/posts/<slug>", methods=["DELETE"])
@token_required
def delete_post(slug: str):
    get_store().delete(slug)
    return jsonify({"message": "Post deleted"})


def handle_blog_error(exc: BlogError):
    return jsonify({"error": exc.message}), exc.status_code


def handle_http_error(exc: HTTPException):
    return jsonify({"error": exc.description}), exc.code


def handle_unexpected_error(exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.path)
    return jsonify({"error": "Internal server error"}), 500


def create_app(
    blog_dir: Optional[Path] = None,
    store: Optional[PostStore] = None,
    **overrides,
) -> Flask:
    """Build the admin API.

    ``store`` wins over ``blog_dir``; both default to ``config.BLOG_DIR``.
    Remaining keyword arguments override entries of ``app.config``.
    """
    app = Flask(__name__)
    app.config.update(
        SECRET_KEY=config.SECRET_KEY,
        PASSWORD_HASH=config.PASSWORD_HASH,
        TOKEN_SALT=config.TOKEN_SALT,
        TOKEN_MAX_AGE=config.TOKEN_MAX_AGE,
        API_PREFIX=config.API_PREFIX,
    )
    app.config.update(overrides)

    app.extensions["post_store"] = store or PostStore(blog_dir or config.BLOG_DIR)
    app.register_blueprint(api, url_prefix=app.config["API_PREFIX"] or None)

    app.register_error_handler(BlogError, handle_blog_error)
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected_error)
    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Blog API listening on :%s", config.PORT)
    app.run(host=config.HOST, port=config.PORT, threaded=True)
