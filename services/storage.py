"""
Storage Helpers

Shared commit/rollback handling for the token and settings stores.
"""

import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from models import db
from utils.errors import InternalError

logger = logging.getLogger(__name__)


@contextmanager
def storage_operation(error_message):
    """
    Run a block of store reads/writes and commit once at the end.

    Any SQLAlchemyError rolls the session back and is re-raised as
    InternalError(error_message).
    """
    try:
        yield db.session
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception(error_message)
        raise InternalError(error_message)
