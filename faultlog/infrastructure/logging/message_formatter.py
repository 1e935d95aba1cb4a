"""Diagnostic text for log messages and exception chains.

format_message() picks between a plain message and an error; format_chain()
renders an error and every error it wraps. Both are pure and synchronous.

Chain layout (one block per level, outermost first):

    Exception type: <module>.<qualname>
    <FaultError.describe() block, for taxonomy faults>
    Exception message: <str(error)>
    <traceback, when the error was raised>
    --Inner exception--
    <next level>

The chain follows ``__cause__``, then ``__context__`` unless
``__suppress_context__`` is set, which is the order the interpreter uses when
printing tracebacks. A chain that loops back on itself ends with
CYCLE_MARKER; one deeper than ``max_depth`` ends with a truncation line.
"""

from __future__ import annotations

import traceback

from faultlog.core.config import get_settings
from faultlog.core.contract import require_not_none
from faultlog.core.errors import FaultError, InvalidArgumentError

INNER_MARKER = "--Inner exception--"
CYCLE_MARKER = "--Cause chain cycle detected--"


def format_message(message: str | None, error: BaseException | None) -> str:
    """Create diagnostic text from a message and/or an error.

    Args:
        message: The message. Can be None or blank if error is given.
        error: Optional error. When given, message is ignored.

    Returns:
        str: Formatted text, never empty.

    Raises:
        InvalidArgumentError: If error is None and message is None or blank.
    """
    if error is None and (message is None or not message.strip()):
        raise InvalidArgumentError(
            "Expected 'message' to be a non-empty string when 'error' is None."
        )
    return format_chain(error) if error is not None else message


def format_chain(error: BaseException | None, *, max_depth: int | None = None) -> str:
    """Render an error and its cause chain. Never raises.

    Args:
        error: The error to render. None is replaced by an InvalidArgumentError
            describing the misuse, so the result is always usable text.
        max_depth: Maximum number of inner exceptions to render. Defaults to
            ``settings.max_cause_depth``. Values below 0 count as 0.

    Returns:
        str: Formatted text, never empty.
    """
    try:
        require_not_none(error, "error")
    except InvalidArgumentError as e:
        error = e
    if max_depth is None:
        max_depth = get_settings().max_cause_depth
    # The outermost error is always rendered.
    max_depth = max(max_depth, 0)

    blocks: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = error
    depth = 0
    while current is not None:
        if id(current) in seen:
            blocks.append(CYCLE_MARKER)
            break
        if depth > max_depth:
            blocks.append(f"--Cause chain truncated after {max_depth} levels--")
            break
        seen.add(id(current))
        if depth:
            blocks.append(INNER_MARKER)
        blocks.append(_format_single(current))
        current = _inner_exception(current)
        depth += 1
    return "\n".join(blocks)


def _format_single(error: BaseException) -> str:
    error_type = type(error)
    lines = [f"Exception type: {error_type.__module__}.{error_type.__qualname__}"]
    if isinstance(error, FaultError):
        lines.append(error.describe())
    lines.append(f"Exception message: {safe_str(error)}")
    if error.__traceback__ is not None:
        lines.append("".join(traceback.format_tb(error.__traceback__)).rstrip())
    return "\n".join(lines)


def _inner_exception(error: BaseException) -> BaseException | None:
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__


def safe_str(error: BaseException) -> str:
    """Return str(error), or a placeholder naming both types if __str__ raises."""
    try:
        return str(error)
    except Exception as e:
        return f"<unprintable {type(error).__name__}: {type(e).__name__}>"
