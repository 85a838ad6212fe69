from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi.responses import Response

# Access key form metrics
form_rejections = Counter(
    "accesskeys_form_rejections_total",
    "Access key form fields rejected during binding",
    ["field", "kind"],  # kind: missing_required_field | invalid_field_type | invalid_enumeration_value
)

access_keys_accepted = Counter(
    "accesskeys_accepted_total",
    "Access key forms handed to the access key handler",
)

# HTTP request metrics (from middleware)
http_requests = Counter(
    "accesskeys_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status_code"],
)

http_request_duration = Histogram(
    "accesskeys_http_request_duration_seconds",
    "HTTP request duration",
    ["method", "path"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


async def metrics_endpoint():
    """FastAPI endpoint handler that returns Prometheus metrics."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
