"""Configured mappings and custom values.

This module demonstrates:

1. A parameter typed with an abstract base resolved through a configured name.
2. ``custom`` values taking precedence over the configured mapping.
3. ``Named`` pinning the symbolic name of a parameter in its annotation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Annotated

from dotwire import ConfigBucket, InjectionResolver, Named, NameRegistry


class Logger(ABC):
    @abstractmethod
    def write(self, message: str) -> str: ...


class FileLogger(Logger):
    def write(self, message: str) -> str:
        return f"file: {message}"


class NullLogger(Logger):
    def write(self, message: str) -> str:
        return "dropped"


class Service:
    def __init__(self, logger: Logger) -> None:
        self.logger = logger


class AuditService:
    def __init__(self, logger: Annotated[Logger, Named("app.null_logger")]) -> None:
        self.logger = logger


def main() -> None:
    names = NameRegistry(
        {
            "app.service": Service,
            "app.audit": AuditService,
            "app.file_logger": FileLogger,
            "app.null_logger": NullLogger,
        },
    )
    config = ConfigBucket({"app.service": {"logger": "app.file_logger"}})
    resolver = InjectionResolver(names, config)

    service = resolver.make("app.service")
    print(service.logger.write("hello"))  # => file: hello

    quiet = resolver.make("app.service", {"logger": NullLogger()})
    print(quiet.logger.write("hello"))  # => dropped

    audit = resolver.make("app.audit")
    print(f"audit_logger={type(audit.logger).__name__}")  # => audit_logger=NullLogger


if __name__ == "__main__":
    main()
