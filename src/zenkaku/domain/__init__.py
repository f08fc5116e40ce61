"""Domain layer — schemes and the scheme registry.

This layer depends only on stdlib.
It must never import from services, commands, config, or output.
"""

from zenkaku.domain.registry import (
    DuplicateNameError,
    SchemeError,
    SchemeRegistry,
    UnknownSchemeError,
    build_default_registry,
)
from zenkaku.domain.schemes import BUILTIN_SCHEMES, Scheme

__all__ = [
    "BUILTIN_SCHEMES",
    "DuplicateNameError",
    "Scheme",
    "SchemeError",
    "SchemeRegistry",
    "UnknownSchemeError",
    "build_default_registry",
]
