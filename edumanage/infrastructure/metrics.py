from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Метрики для HTTP запросов
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

# Метрики для хранилища
store_operations_total = Counter(
    'store_operations_total',
    'Total document store operations',
    ['operation', 'collection']
)
store_errors_total = Counter(
    'store_errors_total',
    'Document store operations that raised',
    ['operation', 'collection', 'kind']
)

# Производные счётчики (totalEnrollment, submissionCount)
counter_increments_total = Counter(
    'counter_increments_total',
    'Derived counter increments by outcome',
    ['collection', 'field', 'outcome']
)

def metrics_endpoint():
    """Endpoint для Prometheus метрик"""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
