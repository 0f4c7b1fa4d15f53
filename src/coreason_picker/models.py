# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_picker

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from coreason_picker.uris import get_user_info


class SelectedItem(BaseModel):
    """Represents one item chosen by the user in the picker.

    Attributes:
        source_identifier: Content URI of the underlying resource. May carry a user
            annotation in its userinfo part (e.g. ``content://10@media/...``).
        local_identifier: Identifier unique within the current selection session.
    """

    model_config = ConfigDict(frozen=True)

    source_identifier: str
    local_identifier: str

    @property
    def user_annotation(self) -> str | None:
        return get_user_info(self.source_identifier)


class CallerContext(BaseModel):
    """The acting user and the caller receiving the result.

    Attributes:
        user_id: The acting user. Used as scope when an item has no user annotation.
        caller_id: Identity of the receiving caller, handed to the access-grant mechanism.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str
    caller_id: str | None = None


class ReferenceIdentifier(BaseModel):
    """Caller-facing identifier returned in the response."""

    model_config = ConfigDict(frozen=True)

    uri: str
    kind: Literal["direct", "redacted", "source"]


class ClipData(BaseModel):
    """Multi-reference payload. Mime types are advisory and never checked against content."""

    model_config = ConfigDict(frozen=True)

    label: str | None = None
    mime_types: list[str]
    items: list[ReferenceIdentifier] = Field(..., min_length=2)


class ResponseEnvelope(BaseModel):
    """The final result handed back to the caller of the picker.

    At most one of ``data`` and ``clip_data`` is populated, and
    ``grant_read_access`` is set exactly when one of them is.
    """

    model_config = ConfigDict(frozen=True)

    data: ReferenceIdentifier | None = None
    clip_data: ClipData | None = None
    grant_read_access: bool = False

    @model_validator(mode="after")
    def _check_payload(self) -> "ResponseEnvelope":
        if self.data is not None and self.clip_data is not None:
            raise ValueError("Envelope cannot carry both a single reference and clip data")
        if self.grant_read_access == self.is_empty:
            raise ValueError("Read access must be granted if and only if the envelope has a payload")
        return self

    @property
    def is_empty(self) -> bool:
        return self.data is None and self.clip_data is None

    @property
    def references(self) -> list[ReferenceIdentifier]:
        """All references in the envelope, in order."""
        if self.data is not None:
            return [self.data]
        if self.clip_data is not None:
            return list(self.clip_data.items)
        return []
