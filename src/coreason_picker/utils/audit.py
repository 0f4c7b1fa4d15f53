import hashlib

from loguru import logger

from coreason_picker.models import CallerContext, ResponseEnvelope


class AuditIntegrator:
    """Standalone Integrator for audit logging.

    Logs picker responses to the standard logger without exposing the returned identifiers.
    """

    def __init__(self, service_name: str = "coreason-picker", enabled: bool = True):
        """Initializes the AuditIntegrator.

        Args:
            service_name: The name of the service (default: 'coreason-picker').
            enabled: Whether to enable audit logging.
        """
        self.service_name = service_name
        self.enabled = enabled

    def log_response(self, envelope: ResponseEnvelope, context: CallerContext) -> str:
        """Log a built picker response.

        Calculates a SHA-256 hash over the returned references and logs it if enabled.

        Args:
            envelope: The envelope handed back to the caller.
            context: The caller receiving the envelope.

        Returns:
            str: The SHA-256 hash of the newline-joined reference URIs.
        """
        references = envelope.references
        digest = hashlib.sha256("\n".join(ref.uri for ref in references).encode("utf-8")).hexdigest()
        if self.enabled:
            kinds = sorted({ref.kind for ref in references})
            logger.info(
                f"AUDIT: {self.service_name} returned {len(references)} references "
                f"to {context.caller_id or 'unknown caller'}. Kinds: {kinds}, Hash: {digest}"
            )
        return digest
