# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_picker


class PickerError(Exception):
    """Base class for errors raised while building a picker response."""


class ContractViolationError(PickerError):
    """The redaction service returned a result that does not line up with its input."""

    def __init__(self, message: str, expected: int, actual: int | None = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
