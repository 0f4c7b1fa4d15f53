# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_picker

from loguru import logger

from coreason_picker.config import PickerConfig
from coreason_picker.redaction import RedactionService, supports_redaction
from coreason_picker.resolver import (
    IdentifierResolver,
    PickerUriResolver,
    RedactedUriResolver,
    SourceUriResolver,
)


class ResolverFactory:
    """
    Factory to create IdentifierResolver instances based on configuration.
    """

    @staticmethod
    def get_resolver(
        config: PickerConfig,
        return_picker_uris: bool = True,
        redaction_service: RedactionService | None = None,
    ) -> IdentifierResolver:
        """
        Returns the resolver for the requested mode and the platform's capabilities.
        """
        if return_picker_uris:
            return PickerUriResolver(base_uri=config.picker_base_uri)

        if redaction_service is not None and supports_redaction(config, redaction_service):
            return RedactedUriResolver(service=redaction_service)

        logger.debug(
            "Redaction unsupported, returning source identifiers",
            platform_api_level=config.platform_api_level,
            has_service=redaction_service is not None,
        )
        return SourceUriResolver()
