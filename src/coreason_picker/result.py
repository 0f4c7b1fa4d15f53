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

from coreason_picker.builder import ResponseBuilder
from coreason_picker.config import PickerConfig
from coreason_picker.factory import ResolverFactory
from coreason_picker.grants import AccessGranter
from coreason_picker.models import CallerContext, ResponseEnvelope, SelectedItem
from coreason_picker.redaction import RedactionService
from coreason_picker.utils.audit import AuditIntegrator


class PickerResult:
    """Returns the result of a selection to the caller of the picker.

    Resolves references for the selected items, then packages them into a
    ResponseEnvelope with read access granted on every returned reference.
    """

    def __init__(
        self,
        config: PickerConfig | None = None,
        redaction_service: RedactionService | None = None,
        granter: AccessGranter | None = None,
    ):
        """Initializes the PickerResult.

        Args:
            config: Optional configuration object. If not provided, defaults are used.
            redaction_service: Optional platform redaction service.
            granter: Optional mechanism asked for read access on each returned reference.
        """
        self.config = config or PickerConfig()
        self.redaction_service = redaction_service
        self.builder = ResponseBuilder(mime_types=self.config.multi_mime_types, granter=granter)
        self.audit = AuditIntegrator(enabled=self.config.enable_audit_logging)

    def get_response(
        self,
        context: CallerContext,
        selected_items: list[SelectedItem],
        return_picker_uris: bool = True,
    ) -> ResponseEnvelope:
        """Build the response envelope for a finished selection.

        Args:
            context: The acting user and the caller receiving the result.
            selected_items: The selected items, in selection order.
            return_picker_uris: Return picker-scoped references. When False, the items'
                identifiers are redacted if the platform supports it, and returned
                unchanged otherwise.

        Returns:
            ResponseEnvelope: The envelope for the caller.

        Raises:
            ContractViolationError: If the redaction service breaks its contract.
        """
        resolver = ResolverFactory.get_resolver(self.config, return_picker_uris, self.redaction_service)
        logger.debug(
            "Resolving picker references",
            resolver=type(resolver).__name__,
            count=len(selected_items),
        )

        references = resolver.resolve(selected_items, context)
        envelope = self.builder.build(references, context)

        self.audit.log_response(envelope, context)
        return envelope


def get_picker_response(
    context: CallerContext,
    selected_items: list[SelectedItem],
    return_picker_uris: bool = True,
    *,
    config: PickerConfig | None = None,
    redaction_service: RedactionService | None = None,
    granter: AccessGranter | None = None,
) -> ResponseEnvelope:
    """Build the response envelope for a finished selection in a single call."""
    picker_result = PickerResult(config=config, redaction_service=redaction_service, granter=granter)
    return picker_result.get_response(context, selected_items, return_picker_uris)
