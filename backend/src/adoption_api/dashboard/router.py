"""Dashboard endpoint (own organization)."""

from typing import Dict

from fastapi import APIRouter
from pydantic import BaseModel

from ..adoption_requests.schemas import StatsData
from ..auth.dependencies import CurrentClaims
from ..dependencies import DbSession
from ..schemas.common import Envelope
from . import service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


class AnimalStats(BaseModel):
    total: int
    por_estado: Dict[str, int]
    ultimos_30_dias: int


class DashboardData(BaseModel):
    animales: AnimalStats
    solicitudes: StatsData
    tasa_adopcion: float


@router.get("/stats", response_model=Envelope[DashboardData])
def dashboard_stats(claims: CurrentClaims, db: DbSession):
    """Counts for the caller's organization, super-administrators included."""
    stats = service.dashboard_statistics(db, claims.organization_id)
    return Envelope(data=DashboardData(**stats))
