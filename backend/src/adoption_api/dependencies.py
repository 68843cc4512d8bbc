"""Global FastAPI dependencies for database access and application services.

Services built once in ``create_app`` (settings, notification dispatcher,
image storage) live on ``app.state`` and are handed to endpoints through
these accessors, so tests can construct an app with substitutes.
"""

from typing import Annotated, Optional, Type, TypeVar

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from .config import Settings
from .database import get_db
from .errors import NotFoundError
from .notifications.dispatcher import NotificationDispatcher
from .uploads.ports import ImageStoragePort

ModelT = TypeVar("ModelT")


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_notifier(request: Request) -> NotificationDispatcher:
    return request.app.state.notifier


def get_image_storage(request: Request) -> ImageStoragePort:
    return request.app.state.image_storage


def get_or_404(
    session: Session,
    model: Type[ModelT],
    record_id: int,
    message: Optional[str] = None,
    code: str = "NOT_FOUND",
) -> ModelT:
    """Get a record by primary key or raise NotFoundError.

    Tenant ownership is NOT checked here. Callers run the authorization
    policy afterwards so a foreign record yields 403, a missing one 404.

    Example:
        animal = get_or_404(db, Animal, animal_id, "Animal not found")
        authorize(claims, animal.organizacion_id, OperationClass.WRITE_OWN_TENANT)
    """
    record = session.get(model, record_id)
    if record is None:
        raise NotFoundError(message or f"{model.__name__} not found", code=code)
    return record


# Type aliases for cleaner endpoint signatures
DbSession = Annotated[Session, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]
Notifier = Annotated[NotificationDispatcher, Depends(get_notifier)]
ImageStorage = Annotated[ImageStoragePort, Depends(get_image_storage)]
