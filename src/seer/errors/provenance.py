# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: seer
"""
Call-site provenance for seer errors.

Captures the function, file and line that constructed an error. Capture is
best effort: when the interpreter cannot hand out frames the result is an
empty ``Provenance`` and construction carries on.
"""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass
from types import FrameType

_CLOSURE_MARKER = ".<locals>."


@dataclass(frozen=True)
class Provenance:
    """Snapshot of the call site that created an error."""

    caller: str = ""
    file: str = ""
    line: int = 0

    def is_empty(self) -> bool:
        """Return True when no field carries information."""
        return not (self.caller or self.file or self.line)


def normalize_caller(module: str, qualname: str) -> str:
    """Build the reported caller name from a module and a qualified name.

    Only the last component of the module path is kept, and nested functions,
    closures and lambdas are reported as their enclosing named function.

    Args:
        module: The ``__name__`` of the module owning the frame
        qualname: The qualified name of the frame's code object

    Returns:
        A name such as ``loader.Loader.load``
    """
    short_module = module.rsplit(".", 1)[-1]
    function = qualname.split(_CLOSURE_MARKER, 1)[0]
    if not short_module:
        return function
    return f"{short_module}.{function}"


def _frame_provenance(frame: FrameType) -> Provenance:
    code = frame.f_code
    return Provenance(
        caller=normalize_caller(
            frame.f_globals.get("__name__", ""),
            code.co_qualname,
        ),
        file=os.path.basename(code.co_filename),
        line=frame.f_lineno,
    )


def capture_provenance(stacklevel: int = 2) -> Provenance:
    """
    Capture provenance of a frame above the caller.

    With the default ``stacklevel`` of 2 the result describes whoever called
    the function that called ``capture_provenance``; this is what the
    factories in ``seer.errors.factories`` want, since they must report their
    own caller rather than themselves.

    Args:
        stacklevel: Number of frames to walk up from this function

    Returns:
        The captured provenance, or an empty one if the stack is unavailable
    """
    frame = inspect.currentframe()
    try:
        for _ in range(stacklevel):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return Provenance()
        return _frame_provenance(frame)
    finally:
        # Frames reference their locals; drop ours to avoid a reference cycle
        del frame
