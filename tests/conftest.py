from typing import Any, Generator
from unittest.mock import MagicMock, patch

import pytest

from coreason_picker.config import PickerConfig
from coreason_picker.models import CallerContext, ReferenceIdentifier, SelectedItem


@pytest.fixture
def mock_caller_context() -> CallerContext:
    return CallerContext(user_id="0", caller_id="com.example.gallery")


@pytest.fixture
def picker_config() -> PickerConfig:
    return PickerConfig(platform_api_level=34, enable_audit_logging=False)


@pytest.fixture
def selected_items() -> list[SelectedItem]:
    return [
        SelectedItem(source_identifier="content://media/external/images/media/7", local_identifier="7"),
        SelectedItem(source_identifier="content://10@media/external/video/media/8", local_identifier="8"),
        SelectedItem(source_identifier="content://media/external/images/media/9", local_identifier="9"),
    ]


@pytest.fixture
def mock_redaction_service() -> MagicMock:
    service = MagicMock()
    service.get_redacted_uris.side_effect = lambda uris: [f"content://media/redacted/{i}" for i in range(len(uris))]
    return service


@pytest.fixture
def mock_audit_integrator() -> Generator[Any, None, None]:
    with patch("coreason_picker.result.AuditIntegrator") as mock:
        yield mock


class RecordingGranter:
    """AccessGranter double that records every grant request it receives."""

    def __init__(self) -> None:
        self.granted: list[tuple[str, str | None]] = []

    def grant_read_access(self, reference: ReferenceIdentifier, context: CallerContext) -> bool:
        self.granted.append((reference.uri, context.caller_id))
        return True


@pytest.fixture
def recording_granter() -> RecordingGranter:
    return RecordingGranter()
