"""Notification dispatcher.

Adoption request notifications are submitted to FastAPI ``BackgroundTasks``
and run after the response has been sent. Delivery is at-most-once and
best-effort: every failure is logged and counted, none reaches the caller
or affects the stored request.

The background job receives a plain ``AdoptionNotification`` snapshot, never
ORM objects, because the request's database session is closed by then.
"""

import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Optional

from fastapi import BackgroundTasks

from ..observability.metrics import notifications_total
from .email_client import EmailClient
from .render import render_email

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdoptionNotification:
    request_id: int
    animal_id: int
    animal_nombre: str
    animal_especie: str
    organization_id: int
    organization_name: Optional[str]
    organization_email: Optional[str]
    nombre_completo: str
    edad: int
    email: str
    telefono_whatsapp: str
    ciudad_zona: str
    tipo_vivienda: str
    motivacion: str
    fecha_solicitud: datetime


class NotificationDispatcher:
    """Submits and delivers notification emails."""

    def __init__(
        self,
        email_client: Optional[EmailClient],
        sender: str,
        fallback_recipient: Optional[str] = None,
        dashboard_url: Optional[str] = None,
    ):
        self.email_client = email_client
        self.sender = sender
        self.fallback_recipient = fallback_recipient
        self.dashboard_url = dashboard_url

    @classmethod
    def from_settings(cls, settings) -> "NotificationDispatcher":
        return cls(
            email_client=EmailClient.from_settings(settings),
            sender=settings.NOTIFICATION_SENDER,
            fallback_recipient=settings.ADMIN_EMAIL,
            dashboard_url=f"{settings.FRONTEND_URL.rstrip('/')}/admin/solicitudes",
        )

    def submit_adoption_request(
        self,
        background_tasks: BackgroundTasks,
        notification: AdoptionNotification,
    ) -> None:
        """Schedule delivery after the response; never blocks the caller."""
        background_tasks.add_task(self.deliver_adoption_request, notification)

    def deliver_adoption_request(self, notification: AdoptionNotification) -> bool:
        """Send the notification email. Returns True when it was handed to SMTP."""
        recipient = notification.organization_email or self.fallback_recipient
        if not recipient:
            logger.warning(
                f"No recipient for adoption request {notification.request_id}; notification skipped",
                extra={"org_id": notification.organization_id},
            )
            notifications_total.labels(kind="adoption_request", status="skipped").inc()
            return False

        if self.email_client is None:
            logger.warning(
                f"SMTP not configured; adoption request {notification.request_id} notification skipped",
                extra={"org_id": notification.organization_id},
            )
            notifications_total.labels(kind="adoption_request", status="skipped").inc()
            return False

        try:
            context = asdict(notification)
            context["fecha_solicitud"] = notification.fecha_solicitud.strftime("%d/%m/%Y %H:%M")
            context["dashboard_url"] = self.dashboard_url
            text_body, html_body = render_email("adoption_request", context)

            self.email_client.send(
                sender=self.sender,
                recipients=[recipient],
                subject=f"Nueva solicitud de adopción: {notification.animal_nombre}",
                text_body=text_body,
                html_body=html_body,
                reply_to=notification.email,
            )
        except Exception as e:
            logger.error(
                f"Failed to send adoption request notification {notification.request_id}: {e}",
                extra={"org_id": notification.organization_id},
                exc_info=True,
            )
            notifications_total.labels(kind="adoption_request", status="error").inc()
            return False

        notifications_total.labels(kind="adoption_request", status="sent").inc()
        return True
