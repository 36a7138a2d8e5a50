"""Error taxonomy for the domain layer.

Domain functions raise these; the service layer converts them into
:class:`~dstctl.services.result.ServiceError` payloads.

INVARIANT: A wall-clock time inside a DST transition window is never an
error. It is reported as advisory data by ``check_dst_issue``.
"""

from __future__ import annotations


class DstError(Exception):
    """Base class for all dstctl domain errors."""

    code = "DST_ERROR"


class ParseError(DstError, ValueError):
    """A date or time string could not be parsed."""

    code = "PARSE_ERROR"


class InvalidArgument(DstError, ValueError):
    """A numeric field or argument is outside its valid range."""

    code = "INVALID_ARGUMENT"
