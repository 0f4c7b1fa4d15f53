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

from coreason_picker.config import PickerConfig


class RedactionService(Protocol):
    """Protocol for the platform service exchanging identifiers for redacted ones."""

    def get_redacted_uris(self, uris: list[str]) -> list[str]:
        """Redacts a batch of identifiers in a single call.

        Args:
            uris: The source identifiers, in selection order.

        Returns:
            list[str]: Redacted identifiers, same length and order as ``uris``.
        """
        ...


def supports_redaction(config: PickerConfig, service: RedactionService | None) -> bool:
    """Capability probe: a service is wired in and the platform is new enough to honour it."""
    if service is None:
        return False
    return config.platform_api_level >= config.redaction_min_api_level
