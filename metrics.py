from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from flask import Response, make_response, request
import time
import functools


REQUEST_COUNT = Counter(
    'movies_request_count',
    'Total Movies API Request Count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'movies_request_duration_seconds',
    'Movies API Request Duration',
    ['method', 'endpoint']
)


MOVIES_CREATED_COUNT = Counter(
    'movies_created_total',
    'Total movies created'
)

MOVIE_CONFLICT_COUNT = Counter(
    'movies_create_conflicts_total',
    'Total create requests rejected because the imdbID exists'
)

STORAGE_ERROR_COUNT = Counter(
    'movies_storage_errors_total',
    'Total storage failures surfaced as 500',
    ['operation']
)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        
        try:
            response = make_response(f(*args, **kwargs))
            
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=response.status_code
            ).inc()
            
            duration = time.time() - start_time
            REQUEST_DURATION.labels(
                method=request.method,
                endpoint=f.__name__
            ).observe(duration)
            
            return response
            
        except Exception:
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=500
            ).inc()
            raise
    
    return wrapper


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
