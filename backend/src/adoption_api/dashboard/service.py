"""Dashboard aggregates for one organization."""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..adoption_requests import service as request_service
from ..models.animal import Animal
from ..models.enums import AnimalStatus

RECENT_ANIMALS_DAYS = 30


def animal_counts_by_status(db: Session, organization_id: int) -> Dict[str, int]:
    rows = (
        db.query(Animal.estado, func.count(Animal.id))
        .filter(Animal.organizacion_id == organization_id)
        .group_by(Animal.estado)
        .all()
    )
    counts = {status.value: 0 for status in AnimalStatus}
    for status, count in rows:
        counts[AnimalStatus(status).value] = count
    return counts


def adoption_rate(adopted: int, total: int) -> float:
    """Adopted animals as a percentage of all animals, one decimal."""
    if total == 0:
        return 0.0
    return round(adopted * 100.0 / total, 1)


def dashboard_statistics(
    db: Session,
    organization_id: int,
    now: Optional[datetime] = None,
) -> Dict[str, object]:
    now = now or datetime.now(timezone.utc)

    animals_by_status = animal_counts_by_status(db, organization_id)
    total_animals = sum(animals_by_status.values())
    recent_animals = (
        db.query(func.count(Animal.id))
        .filter(
            Animal.organizacion_id == organization_id,
            Animal.fecha_publicacion >= now - timedelta(days=RECENT_ANIMALS_DAYS),
        )
        .scalar()
    )
    requests = request_service.request_statistics(db, organization_id, now=now)

    return {
        "animales": {
            "total": total_animals,
            "por_estado": animals_by_status,
            "ultimos_30_dias": recent_animals or 0,
        },
        "solicitudes": requests,
        "tasa_adopcion": adoption_rate(animals_by_status[AnimalStatus.ADOPTED.value], total_animals),
    }
