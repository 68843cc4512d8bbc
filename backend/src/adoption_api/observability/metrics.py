"""Prometheus metrics for the adoption API."""

from prometheus_client import Counter

login_attempts_total = Counter(
    "adopcion_login_attempts_total",
    "Administrator login attempts",
    ["result"]  # result: success|invalid_credentials|organization_inactive
)

adoption_requests_created_total = Counter(
    "adopcion_adoption_requests_created_total",
    "Adoption requests accepted",
    ["org_id"]
)

adoption_requests_rejected_total = Counter(
    "adopcion_adoption_requests_rejected_total",
    "Adoption request submissions refused by a domain rule",
    ["reason"]  # reason: animal_not_found|animal_not_available
)

notifications_total = Counter(
    "adopcion_notifications_total",
    "Outbound notification outcomes",
    ["kind", "status"]  # status: sent|error|skipped
)

uploads_total = Counter(
    "adopcion_uploads_total",
    "Image upload and delete operations",
    ["operation", "status"]  # operation: upload|delete, status: success|error
)
