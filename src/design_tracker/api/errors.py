"""Mapping of the error taxonomy onto HTTP responses."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status

from design_tracker.domain.exceptions import DesignTrackerError, StoreError

log = logging.getLogger(__name__)


@contextmanager
def error_boundary(failure_detail: str) -> Iterator[None]:
    """Translate failures raised by a handler body into HTTP errors.

    Validation, not-found and conflict errors keep their own message. Store
    failures and anything unexpected are logged with full detail and reported
    to the caller only as ``failure_detail`` with a 500.
    """
    try:
        yield
    except HTTPException:
        raise
    except StoreError as e:
        log.exception(f"{failure_detail}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure_detail) from e
    except DesignTrackerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    except Exception as e:
        log.exception(f"{failure_detail}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure_detail) from e
