"""DRF integration for domain errors."""

from __future__ import annotations

import logging

from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.domain.exceptions import DomainError

logger = logging.getLogger(__name__)


def domain_exception_handler(exc, context):  # type: ignore
    """Render DomainError as ``{"detail": reason, "code": code}``."""

    if isinstance(exc, DomainError):
        view = context.get("view")
        logger.info(
            f"Rejected {view.__class__.__name__ if view else 'request'}: "
            f"{exc.code} ({exc.reason})"
        )
        return Response({"detail": exc.reason, "code": exc.code}, status=exc.status_code)
    return exception_handler(exc, context)
