from prometheus_client import Counter, Histogram
import time
from typing import Callable
from functools import wraps

# API Metrics
HTTP_REQUEST_COUNT = Counter(
    'http_request_total',
    'Total number of HTTP requests',
    ['method', 'endpoint', 'status']
)

HTTP_REQUEST_DURATION = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

# Waitlist Metrics
WAITLIST_SIGNUP_COUNT = Counter(
    'waitlist_signup_total',
    'Total number of waitlist signup attempts',
    ['outcome']  # outcomes: created, already_registered, invalid, store_error, unexpected_error
)

WELCOME_EMAIL_COUNT = Counter(
    'welcome_email_total',
    'Total number of welcome email sends',
    ['status']  # statuses: sent, failed
)

# Database Metrics
DB_OPERATION_DURATION = Histogram(
    'db_operation_duration_seconds',
    'Database operation duration in seconds',
    ['operation']
)

def track_time(metric: Histogram) -> Callable:
    """Decorator to track synchronous function execution time"""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                return func(*args, **kwargs)
            finally:
                metric.observe(time.time() - start_time)

        return sync_wrapper
    return decorator
