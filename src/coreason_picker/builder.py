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

from coreason_picker.grants import AccessGranter
from coreason_picker.models import CallerContext, ClipData, ReferenceIdentifier, ResponseEnvelope


class ResponseBuilder:
    """Packages resolved references into a ResponseEnvelope."""

    def __init__(self, mime_types: list[str] | None = None, granter: AccessGranter | None = None):
        """Initializes the ResponseBuilder.

        Args:
            mime_types: Content categories attached to multi-reference envelopes.
            granter: Optional AccessGranter asked for read access on every returned reference.
        """
        self.mime_types = list(mime_types) if mime_types is not None else ["image/*", "video/*"]
        self.granter = granter

    def build(self, references: list[ReferenceIdentifier], context: CallerContext) -> ResponseEnvelope:
        """Build the envelope for the resolved references.

        The envelope shape depends only on the count: none, a single reference, or
        clip data holding every reference in input order.

        Args:
            references: The resolved references, in selection order.
            context: The caller receiving the envelope.

        Returns:
            ResponseEnvelope: The envelope, with read access granted when non-empty.
        """
        if not references:
            logger.warning("Building picker response for an empty selection")
            return ResponseEnvelope()

        if len(references) == 1:
            envelope = ResponseEnvelope(data=references[0], grant_read_access=True)
        else:
            clip_data = ClipData(label=None, mime_types=self.mime_types, items=list(references))
            envelope = ResponseEnvelope(clip_data=clip_data, grant_read_access=True)

        if self.granter is not None:
            for reference in envelope.references:
                self.granter.grant_read_access(reference, context)

        return envelope
