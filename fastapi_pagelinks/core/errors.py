"""Pagination errors and JSON error object helpers."""

from typing import Any


class PaginationError(Exception):
    """Base class for pagination failures."""

    code: str = "PAGINATION_ERROR"
    status: str = "500"
    title: str = "Pagination Error"


class InvalidPolicy(PaginationError, ValueError):
    """Window sizes were negative or not integers."""

    code = "INVALID_POLICY"
    title = "Invalid Pagination Policy"


class URLResolutionError(PaginationError):
    """A URL builder could not resolve parameters to a URL."""

    code = "URL_RESOLUTION_ERROR"
    title = "URL Resolution Failed"


class MissingCollectionError(PaginationError, LookupError):
    """No collection was passed and none could be inferred from the request."""

    code = "MISSING_COLLECTION"
    title = "Missing Paginated Collection"


class PaginationErrorBuilder:
    """Build error objects and error documents for pagination failures."""

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return an error object with the given members."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def from_exception(self, exc: BaseException) -> dict[str, Any]:
        """Return an error object describing ``exc``."""
        if isinstance(exc, PaginationError):
            return self.error_object(
                status=exc.status,
                code=exc.code,
                title=exc.title,
                detail=str(exc) or None,
            )
        return self.error_object(
            status="500",
            code="INTERNAL_ERROR",
            title="Internal Server Error",
            detail=str(exc) or None,
        )

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a document with an errors array."""
        return {"errors": errors}
