from flask import Blueprint, Flask, current_app, g, jsonify, request
from config import Config
import logging
import time

from database.movies_db import PostgresMovieStore
from database.store import create_store
from services.movie_service import MovieService
from services.outcomes import Conflict, Created, InternalError
from services.responses import to_response
from services.storage_check import check_storage

from metrics import (
    metrics_endpoint, track_request,
    MOVIES_CREATED_COUNT, MOVIE_CONFLICT_COUNT, STORAGE_ERROR_COUNT
)

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


movies_bp = Blueprint('movies', __name__)


def get_movie_service():
    return current_app.extensions['movie_service']


def respond(outcome, operation):
    if isinstance(outcome, InternalError):
        STORAGE_ERROR_COUNT.labels(operation=operation).inc()

    status_code, body = to_response(outcome)
    return jsonify(body), status_code


@movies_bp.route('/health')
@track_request
def health():
    return jsonify({
        'status': 'healthy',
        'service': 'movies-api',
        'version': '1.0.0'
    }), 200


@movies_bp.route('/check/storage')
def check_storage_endpoint():
    result = check_storage(get_movie_service().store)
    status_code = 200 if result['status'] == 'healthy' else 503
    return jsonify(result), status_code


@movies_bp.route('/movies', methods=['GET'])
@track_request
def list_movies():
    outcome = get_movie_service().get_movies(request.args.get('year'))
    return respond(outcome, 'list')


@movies_bp.route('/movies/<imdb_id>', methods=['GET'])
@track_request
def get_movie(imdb_id):
    outcome = get_movie_service().get_movie(imdb_id)
    return respond(outcome, 'lookup')


@movies_bp.route('/movies', methods=['POST'])
@track_request
def create_movie():
    payload = request.get_json(silent=True)
    outcome = get_movie_service().create_movie(payload)

    if isinstance(outcome, Created):
        MOVIES_CREATED_COUNT.inc()
    elif isinstance(outcome, Conflict):
        MOVIE_CONFLICT_COUNT.inc()

    return respond(outcome, 'create')


@movies_bp.route('/metrics')
def metrics():
    return metrics_endpoint()


def log_request_start():
    g.request_started = time.time()


def log_request(response):
    started = g.get('request_started')
    duration_ms = (time.time() - started) * 1000 if started else 0.0

    logger.info(
        f"{request.method} {request.full_path.rstrip('?')} "
        f"{response.status_code} {duration_ms:.1f}ms"
    )
    return response


def create_app(config=Config, store=None):
    """
    Build the Flask app around a movie store

    Args:
        config: settings object, defaults to Config
        store: movie store to serve; created from config.STORAGE_BACKEND when omitted
    """
    app = Flask(__name__)
    app.config.from_object(config)

    if store is None:
        store = create_store(config)

    app.extensions['movie_service'] = MovieService(store)

    app.before_request(log_request_start)
    app.after_request(log_request)
    app.register_blueprint(movies_bp)

    return app


app = create_app()


if __name__ == '__main__':
    store = app.extensions['movie_service'].store
    if isinstance(store, PostgresMovieStore):
        store.create_schema()

    logger.info(f"start ... port: {Config.FLASK_PORT}")
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
