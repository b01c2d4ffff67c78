"""Translation of SQLAlchemy failures into the domain's StorageError."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from data_design.domain.exceptions import StorageError


@contextmanager
def storage_errors(logger: logging.Logger, action: str) -> Iterator[None]:
    """Re-raise any SQLAlchemy error raised inside the block as a StorageError.

    The original exception stays attached as the cause; nothing is retried.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Could not %s: %s", action, exc)
        raise StorageError(f"could not {action}", exc) from exc
