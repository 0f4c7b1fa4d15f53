# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_picker

from abc import ABC, abstractmethod

from loguru import logger

from coreason_picker.config import PICKER_URI
from coreason_picker.exceptions import ContractViolationError
from coreason_picker.models import CallerContext, ReferenceIdentifier, SelectedItem
from coreason_picker.redaction import RedactionService
from coreason_picker.uris import append_path


class IdentifierResolver(ABC):
    """
    Abstract base class for turning selected items into caller-facing references.
    Follows the Strategy Pattern.
    """

    @abstractmethod
    def resolve(self, items: list[SelectedItem], context: CallerContext) -> list[ReferenceIdentifier]:
        """Resolve references for the selection.

        Args:
            items: The selected items, in selection order.
            context: The acting user and receiving caller.

        Returns:
            list[ReferenceIdentifier]: One reference per item, same order as ``items``.
        """
        pass  # pragma: no cover


class PickerUriResolver(IdentifierResolver):
    """Builds picker-scoped references: ``<base>/<user>/<local id>``."""

    def __init__(self, base_uri: str = PICKER_URI):
        self.base_uri = base_uri

    def picker_uri(self, item: SelectedItem, context: CallerContext) -> str:
        user_id = item.user_annotation
        if user_id is None:
            user_id = context.user_id
        return append_path(self.base_uri, user_id, item.local_identifier)

    def resolve(self, items: list[SelectedItem], context: CallerContext) -> list[ReferenceIdentifier]:
        return [ReferenceIdentifier(uri=self.picker_uri(item, context), kind="direct") for item in items]


class RedactedUriResolver(IdentifierResolver):
    """Exchanges source identifiers for redacted ones in one batched service call."""

    def __init__(self, service: RedactionService):
        self.service = service

    def resolve(self, items: list[SelectedItem], context: CallerContext) -> list[ReferenceIdentifier]:
        """Resolve redacted references.

        Raises:
            ContractViolationError: If the service result does not match the input length
                or contains empty entries.
            Exception: Any failure from the redaction service, unmodified.
        """
        if not items:
            return []

        sources = [item.source_identifier for item in items]
        logger.debug(f"Requesting redaction for {len(sources)} identifiers")
        redacted = self.service.get_redacted_uris(sources)

        if not isinstance(redacted, list) or len(redacted) != len(sources):
            actual = len(redacted) if isinstance(redacted, list) else None
            logger.error(f"Redaction service returned {actual} identifiers for {len(sources)} inputs")
            raise ContractViolationError(
                f"Redaction service returned {actual} identifiers, expected {len(sources)}",
                expected=len(sources),
                actual=actual,
            )

        for position, uri in enumerate(redacted):
            if not isinstance(uri, str) or not uri:
                raise ContractViolationError(
                    f"Redaction service returned an empty or non-string identifier at position {position}",
                    expected=len(sources),
                    actual=len(redacted),
                )

        return [ReferenceIdentifier(uri=uri, kind="redacted") for uri in redacted]


class SourceUriResolver(IdentifierResolver):
    """
    Compatibility shim for platforms without the redaction service.
    Returns the source identifiers unchanged.
    """

    def resolve(self, items: list[SelectedItem], context: CallerContext) -> list[ReferenceIdentifier]:
        return [ReferenceIdentifier(uri=item.source_identifier, kind="source") for item in items]
