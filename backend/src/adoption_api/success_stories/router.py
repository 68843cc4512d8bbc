"""Success story endpoints (public reads, own-tenant writes)."""

from fastapi import APIRouter, status

from ..auth.dependencies import CurrentClaims
from ..dependencies import DbSession
from ..schemas.common import Envelope
from . import service
from .schemas import (
    AllStoriesData,
    OrganizationStoriesData,
    StoryData,
    SuccessStoryCreate,
    SuccessStoryResponse,
    SuccessStoryUpdate,
)

router = APIRouter(prefix="/casos-exito", tags=["Success Stories"])


@router.get("", response_model=Envelope[AllStoriesData])
def list_success_stories(db: DbSession):
    return Envelope(data=AllStoriesData(organizaciones=service.list_all_stories(db)))


@router.get("/{org_slug}", response_model=Envelope[OrganizationStoriesData])
def list_organization_success_stories(org_slug: str, db: DbSession):
    return Envelope(data=OrganizationStoriesData(organizacion=service.stories_for_slug(db, org_slug)))


@router.post("", response_model=Envelope[StoryData], status_code=status.HTTP_201_CREATED)
def create_success_story(data: SuccessStoryCreate, claims: CurrentClaims, db: DbSession):
    story = service.create_story(db, claims, data)
    return Envelope(
        data=StoryData(caso_exito=SuccessStoryResponse.model_validate(story)),
        message="Success story published",
    )


@router.put("/{story_id}", response_model=Envelope[StoryData])
def update_success_story(
    story_id: int,
    data: SuccessStoryUpdate,
    claims: CurrentClaims,
    db: DbSession,
):
    story = service.update_story(db, claims, story_id, data)
    return Envelope(
        data=StoryData(caso_exito=SuccessStoryResponse.model_validate(story)),
        message="Success story updated",
    )
