"""Service layer — operations returning :class:`ServiceResult`."""

from zenkaku.services.convert import ConvertService
from zenkaku.services.result import ServiceError, ServiceResult

__all__ = ["ConvertService", "ServiceError", "ServiceResult"]
