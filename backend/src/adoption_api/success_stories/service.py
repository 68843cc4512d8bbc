"""Success story operations."""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from ..auth.claims import Claims
from ..dependencies import get_or_404
from ..errors import ConflictError, NotFoundError
from ..models.animal import Animal
from ..models.organization import Organization
from ..models.success_story import SuccessStory
from ..tenancy.policy import OperationClass, authorize
from .schemas import OrganizationStories, SuccessStoryCreate, SuccessStoryResponse, SuccessStoryUpdate

logger = logging.getLogger(__name__)

# A null in a partial update keeps these fields
_REQUIRED_FIELDS = frozenset({"titulo", "historia", "fecha_adopcion"})


def _stories_for(db: Session, organization_id: int) -> List[SuccessStory]:
    return (
        db.query(SuccessStory)
        .options(joinedload(SuccessStory.animal))
        .filter(SuccessStory.organizacion_id == organization_id)
        .order_by(SuccessStory.fecha_publicacion.desc(), SuccessStory.id.desc())
        .all()
    )


def _group(organization: Organization, stories: List[SuccessStory]) -> OrganizationStories:
    return OrganizationStories(
        id=organization.id,
        nombre=organization.nombre,
        slug=organization.slug,
        logo_url=organization.logo_url,
        casos_exito=[SuccessStoryResponse.model_validate(s) for s in stories],
    )


def list_all_stories(db: Session) -> List[OrganizationStories]:
    """Active organizations that have at least one story, with their stories."""
    organizations = (
        db.query(Organization)
        .filter(Organization.activa.is_(True))
        .filter(Organization.casos_exito.any())
        .order_by(Organization.nombre)
        .all()
    )
    return [_group(org, _stories_for(db, org.id)) for org in organizations]


def stories_for_slug(db: Session, slug: str) -> OrganizationStories:
    organization = (
        db.query(Organization)
        .filter(Organization.slug == slug, Organization.activa.is_(True))
        .first()
    )
    if organization is None:
        raise NotFoundError("Organization not found")
    return _group(organization, _stories_for(db, organization.id))


def create_story(db: Session, claims: Claims, data: SuccessStoryCreate) -> SuccessStory:
    """Publish the story of an animal owned by the caller's organization.

    Raises:
        NotFoundError: ANIMAL_NOT_FOUND
        AuthorizationError: the animal belongs to another organization
        ConflictError: DUPLICATE_ERROR, the animal already has a story
    """
    animal = get_or_404(db, Animal, data.animal_id, "Animal not found", code="ANIMAL_NOT_FOUND")
    authorize(
        claims,
        animal.organizacion_id,
        OperationClass.WRITE_OWN_TENANT,
        "You do not have permission to publish a story for this animal",
    )

    existing = db.query(SuccessStory.id).filter(SuccessStory.animal_id == animal.id).first()
    if existing is not None:
        raise ConflictError("This animal already has a success story", code="DUPLICATE_ERROR")

    story = SuccessStory(**data.model_dump(), organizacion_id=animal.organizacion_id)
    db.add(story)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("This animal already has a success story", code="DUPLICATE_ERROR")
    db.refresh(story)

    logger.info(
        f"Success story {story.id} published for animal {animal.id}",
        extra={"org_id": animal.organizacion_id},
    )
    return story


def update_story(db: Session, claims: Claims, story_id: int, data: SuccessStoryUpdate) -> SuccessStory:
    story = get_or_404(db, SuccessStory, story_id, "Success story not found")
    authorize(
        claims,
        story.organizacion_id,
        OperationClass.WRITE_OWN_TENANT,
        "You do not have permission to modify this success story",
    )

    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and field in _REQUIRED_FIELDS:
            continue
        setattr(story, field, value)

    db.commit()
    db.refresh(story)
    logger.info(f"Success story {story.id} updated", extra={"org_id": story.organizacion_id})
    return story
