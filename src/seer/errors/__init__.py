# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: seer

"""
Annotated errors for seer.
"""

from __future__ import annotations

from seer.errors.base import SeerError, render_error
from seer.errors.factories import new, wrap, wrap_always, wrap_error
from seer.errors.helpers import iter_chain, root_cause
from seer.errors.provenance import Provenance, capture_provenance

__all__ = [
    # Error value
    "SeerError",
    "Provenance",
    # Factories
    "new",
    "wrap",
    "wrap_always",
    "wrap_error",
    # Helpers
    "capture_provenance",
    "iter_chain",
    "render_error",
    "root_cause",
]
