"""BaseService — shared foundation for all dstctl services.

Every service receives the resolved :class:`DstSettings` at construction
time; thresholds and booking limits default from it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from dstctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from dstctl.config.settings import DstSettings
    from dstctl.domain.errors import DstError

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class CalendarService(BaseService):
            def near(self, moment: Moment) -> ServiceResult:
                try:
                    ...
                except DstError as exc:
                    return self._domain_error("near", exc)
    """

    def __init__(self, settings: DstSettings) -> None:
        self._settings = settings

    @staticmethod
    def _failure(
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )

    def _domain_error(self, op: str, exc: DstError) -> ServiceResult:
        """Convert a domain exception into a failed ServiceResult."""
        logger.debug("%s failed: %s", op, exc)
        return self._failure(op, exc.code, str(exc))

    def _meta(self, **used: Any) -> dict[str, Any]:
        """Settings an operation ran with, echoed back in ``ServiceResult.meta``."""
        config_path = self._settings.config_path
        return {"config": str(config_path) if config_path else None, **used}
