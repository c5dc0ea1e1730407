from __future__ import annotations

from exercise_library.core import errors as api_errors
from exercise_library.services._shared.errors import NotFoundError, ServiceError
from exercise_library.uow.base import UnitOfWork, UnitOfWorkFactory


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Open read-only and read-write units of work from injected factories.
    * Translate service errors into API errors for the HTTP layer.

    Notes
    -----
    Services never touch a global session; storage is reached only through
    the unit of work handed out by the factories.
    """

    def __init__(
        self,
        *,
        uow_factory: UnitOfWorkFactory,
        read_uow_factory: UnitOfWorkFactory | None = None,
    ) -> None:
        """
        :param uow_factory: Builds a read-write unit of work.
        :param read_uow_factory: Builds a read-only unit of work; defaults to
            ``uow_factory`` when the backend has no cheaper read path.
        """
        self._uow_factory = uow_factory
        self._read_uow_factory = read_uow_factory or uow_factory

    def rw_uow(self) -> UnitOfWork:
        return self._uow_factory()

    def ro_uow(self) -> UnitOfWork:
        return self._read_uow_factory()

    @staticmethod
    def translate_exceptions(exc: Exception) -> Exception:
        """
        Map service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :returns: Translated exception ready to be re-raised; unknown
            exceptions are returned untouched.
        """
        if isinstance(exc, NotFoundError):
            return api_errors.NotFound(str(exc))

        if isinstance(exc, ServiceError):
            return api_errors.APIError(message=str(exc), status_code=400, code="bad_request")

        return exc
