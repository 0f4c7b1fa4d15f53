# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_picker

from typing import Protocol

from coreason_picker.models import CallerContext, ReferenceIdentifier


class AccessGranter(Protocol):
    """Protocol for the mechanism granting a caller temporary read access."""

    def grant_read_access(self, reference: ReferenceIdentifier, context: CallerContext) -> bool:
        """Requests read access on ``reference`` for the caller in ``context``.

        Returns:
            bool: Whether the grant succeeded.
        """
        ...
