# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_picker

from pydantic_settings import BaseSettings, SettingsConfigDict

PICKER_URI = "content://media/picker"

# First platform level shipping the batched redaction API.
REDACTION_MIN_API_LEVEL = 31


class PickerConfig(BaseSettings):
    """
    Configuration for building picker responses.
    """

    picker_base_uri: str = PICKER_URI
    platform_api_level: int = 34
    redaction_min_api_level: int = REDACTION_MIN_API_LEVEL

    # TODO: derive from the selected items' real mime types instead of a fixed pair.
    multi_mime_types: list[str] = ["image/*", "video/*"]
    enable_audit_logging: bool = True

    model_config = SettingsConfigDict(
        env_prefix="COREASON_PICKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
