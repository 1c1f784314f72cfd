"""Store call wrapper that turns database failures into feed errors."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tenet_feed.core.errors import FeedError, StoreUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def store_operation(db: Session, action: str) -> Iterator[None]:
    """Run a block of store calls, rolling back on any failure.

    Args:
        db: Session the block writes through.
        action: Short name of the operation, used in logs and error messages.

    Raises:
        StoreUnavailable: If SQLAlchemy raised inside the block.
        FeedError: Re-raised unchanged after rolling back.
    """
    try:
        yield
    except FeedError:
        db.rollback()
        raise
    except SQLAlchemyError as err:
        db.rollback()
        logger.error("Store failure during %s", action, exc_info=True)
        raise StoreUnavailable(f"{action} failed") from err
