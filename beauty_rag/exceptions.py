"""Beauty RAG Exception Hierarchy.

Provides structured exception classes for the retrieval engine.

Hierarchy:
    BeautyRAGError (base)
    ├── ConfigurationError
    │   └── InvalidConfigError
    ├── KnowledgeStoreError
    │   ├── KnowledgeDataNotFoundError
    │   └── KnowledgeDataInvalidError
    └── InvalidInputError

Tenant documents and catalog items never raise: malformed entries are
skipped by the retrieval layer.
"""

from typing import Any


class BeautyRAGError(Exception):
    """Base exception for all Beauty RAG errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error
        recoverable: Whether the error can be recovered from
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "recoverable": self.recoverable,
        }


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(BeautyRAGError):
    """Base exception for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is invalid."""

    def __init__(
        self,
        config_key: str,
        value: Any,
        reason: str,
    ) -> None:
        super().__init__(
            message=f"Invalid configuration for {config_key}: {reason}",
            details={
                "config_key": config_key,
                "value": str(value),
                "reason": reason,
            },
            recoverable=False,
        )


# =============================================================================
# Knowledge Store Errors
# =============================================================================


class KnowledgeStoreError(BeautyRAGError):
    """Base exception for static knowledge store failures.

    Always fatal: the engine cannot serve requests without its datasets.
    """

    pass


class KnowledgeDataNotFoundError(KnowledgeStoreError):
    """Raised when a bundled dataset file is missing."""

    def __init__(self, dataset: str, path: str) -> None:
        super().__init__(
            message=f"Knowledge dataset not found: {dataset}",
            details={"dataset": dataset, "path": path},
            recoverable=False,
        )
        self.dataset = dataset


class KnowledgeDataInvalidError(KnowledgeStoreError):
    """Raised when a dataset cannot be parsed or fails validation."""

    def __init__(self, dataset: str, reason: str) -> None:
        super().__init__(
            message=f"Invalid knowledge dataset {dataset}: {reason}",
            details={"dataset": dataset, "reason": reason},
            recoverable=False,
        )
        self.dataset = dataset


# =============================================================================
# Input Errors
# =============================================================================


class InvalidInputError(BeautyRAGError):
    """Raised when a required call argument is missing or of the wrong type."""

    def __init__(self, argument: str, reason: str) -> None:
        super().__init__(
            message=f"Invalid argument {argument}: {reason}",
            details={"argument": argument, "reason": reason},
            recoverable=False,
        )
        self.argument = argument
