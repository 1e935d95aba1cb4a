"""Base fault class for the classified error taxonomy.

FaultError is the base class for ALL classified failures. Unlike plain
exceptions, every fault carries metadata an operator or an external system
can act on without knowing the Python class:

- retry_meaningful: whether re-attempting the same call could succeed
- type_discriminator: stable FaultType value, fixed per kind
- correlation_id: shared by every fault raised in one logical operation
- instance_id: unique to this one occurrence
- friendly_message: operator guidance built from a per-kind template
- more_info_url: documentation link for the kind

Architecture:
- Inherits from Exception (faults are raised and propagate normally)
- One flat level of kinds; a kind only fixes class-level metadata
- Metadata is assigned once in __init__ and is read-only afterwards

Usage:
    from faultlog.core.errors import FaultError
    from faultlog.core.enums import FaultType

    class RateLimitedFault(FaultError):
        type_discriminator = FaultType.TIMEOUT
        retry_meaningful = True
        friendly_template = "The service is busy, try again shortly."
"""

from __future__ import annotations

from typing import Any, ClassVar

from uuid_extensions import uuid7

from faultlog.core.config import get_settings
from faultlog.core.correlation import get_correlation_id, new_correlation_id
from faultlog.core.enums import FaultType

_READ_ONLY = frozenset({"retry_meaningful", "type_discriminator", "friendly_template"})


class FaultError(Exception):
    """Base fault (abstract: raise one of its kinds).

    Args:
        message: Human-readable message. May be omitted when a cause is given.
        cause: Lower-level failure this fault wraps. Stored as ``__cause__``.
        correlation_id: Overrides the correlation ID of the active scope.
    """

    type_discriminator: ClassVar[FaultType]
    retry_meaningful: ClassVar[bool] = False
    friendly_template: ClassVar[str] = ""

    def __init__(
        self,
        message: str | None = None,
        cause: BaseException | None = None,
        *,
        correlation_id: str | None = None,
    ) -> None:
        if type(self) is FaultError:
            raise TypeError("FaultError is abstract; raise one of its kinds")
        super().__init__(*((message,) if message else ()))
        self.__cause__ = cause
        self._message = message or ""
        self._correlation_id = (
            correlation_id or get_correlation_id() or new_correlation_id()
        )
        self._instance_id = str(uuid7())
        self._friendly_message = self._build_friendly_message()
        self._more_info_url = (
            f"{get_settings().more_info_base_url}#{type(self).__name__}"
        )

    @classmethod
    def create(
        cls, message: str | None = None, cause: BaseException | None = None
    ) -> FaultError:
        """Factory method.

        Args:
            message: Human-readable message.
            cause: Optional wrapped failure.

        Returns:
            FaultError: A new instance of the calling kind.
        """
        return cls(message, cause)

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    @property
    def correlation_id(self) -> str:
        return self._correlation_id

    @property
    def instance_id(self) -> str:
        return self._instance_id

    @property
    def friendly_message(self) -> str:
        return self._friendly_message

    @property
    def more_info_url(self) -> str:
        return self._more_info_url

    def _build_friendly_message(self) -> str:
        return (
            f"{self.friendly_template}"
            f" Please report the following:"
            f"\nCorrelationId: {self._correlation_id}"
            f"\nInstanceId: {self._instance_id}"
        )

    def describe(self) -> str:
        """Multi-line structured rendering used in diagnostic output.

        Returns:
            str: One ``Key: value`` line per metadata field.
        """
        return "\n".join(
            [
                f"Type: {self.type_discriminator.value}",
                f"CorrelationId: {self.correlation_id}",
                f"InstanceId: {self.instance_id}",
                f"RetryMeaningful: {self.retry_meaningful}",
                f"FriendlyMessage: {self.friendly_message}",
                f"MoreInfoUrl: {self.more_info_url}",
            ]
        )

    def to_dict(self) -> dict[str, Any]:
        """Machine-readable snapshot for external classification.

        Returns:
            dict[str, Any]: Fault metadata keyed by snake_case names.
        """
        return {
            "type": self.type_discriminator.value,
            "message": self.message,
            "correlation_id": self.correlation_id,
            "instance_id": self.instance_id,
            "retry_meaningful": self.retry_meaningful,
            "friendly_message": self.friendly_message,
            "more_info_url": self.more_info_url,
        }

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _READ_ONLY:
            raise AttributeError(f"{name} is fixed per fault kind")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self._message!r}, "
            f"type={self.type_discriminator.value!r}, "
            f"instance_id={self._instance_id!r})"
        )
