# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_picker

"""
coreason-picker
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .builder import ResponseBuilder
from .config import PickerConfig
from .exceptions import ContractViolationError, PickerError
from .factory import ResolverFactory
from .grants import AccessGranter
from .models import CallerContext, ClipData, ReferenceIdentifier, ResponseEnvelope, SelectedItem
from .redaction import RedactionService, supports_redaction
from .resolver import IdentifierResolver, PickerUriResolver, RedactedUriResolver, SourceUriResolver
from .result import PickerResult, get_picker_response
from .utils.logger import logger

__all__ = [
    "AccessGranter",
    "CallerContext",
    "ClipData",
    "ContractViolationError",
    "IdentifierResolver",
    "PickerConfig",
    "PickerError",
    "PickerResult",
    "PickerUriResolver",
    "RedactedUriResolver",
    "RedactionService",
    "ReferenceIdentifier",
    "ResolverFactory",
    "ResponseBuilder",
    "ResponseEnvelope",
    "SelectedItem",
    "SourceUriResolver",
    "get_picker_response",
    "logger",
    "supports_redaction",
]
