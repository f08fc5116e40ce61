"""ConvertService: line-by-line encode/decode and the scheme listing."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from zenkaku.domain.registry import UnknownSchemeError
from zenkaku.services.result import ServiceResult

if TYPE_CHECKING:
    from zenkaku.domain.registry import SchemeRegistry

logger = logging.getLogger(__name__)


class ConvertService:
    """Conversions against one :class:`SchemeRegistry`."""

    def __init__(self, registry: SchemeRegistry) -> None:
        self._registry = registry

    def convert(
        self,
        lines: Iterable[str],
        scheme_name: str,
        *,
        reverse: bool = False,
    ) -> ServiceResult:
        """Encode each line with *scheme_name*, or decode with *reverse*.

        The name is resolved before any line is read, so an unknown scheme
        produces an ``UNKNOWN_SCHEME`` failure and no converted lines.
        """
        op = "decode" if reverse else "encode"
        try:
            scheme = self._registry.resolve(scheme_name)
        except UnknownSchemeError as exc:
            return ServiceResult.failure(
                op, "UNKNOWN_SCHEME", str(exc), name=exc.name, available=exc.available
            )

        transform = scheme.decode if reverse else scheme.encode
        converted = [transform(line) for line in lines]
        logger.debug("%s %d line(s) with %s", op, len(converted), scheme.name)
        return ServiceResult.success(
            op, scheme=scheme.name, lines=converted, count=len(converted)
        )

    def list_schemes(self) -> ServiceResult:
        items = [
            {
                "name": scheme.name,
                "glyphs": "".join(scheme.glyphs),
                "description": scheme.description,
            }
            for scheme in self._registry.schemes()
        ]
        return ServiceResult.success("list_schemes", items=items, count=len(items))
