"""Unit tests for ComposeService."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from social_post_generator.cli.compose.params import ComposeParams
from social_post_generator.cli.compose.service import ComposeService
from social_post_generator.cli.core.types import Failure, Success
from social_post_generator.content.models import Failed
from social_post_generator.errors import BackendRejected, BackendUnreachable
from social_post_generator.providers.config import GeneratorConfig

from conftest import LAUNCH_INPUT, LAUNCH_POST


@pytest.fixture
def service(generator_config: GeneratorConfig, mock_client: AsyncMock) -> ComposeService:
    return ComposeService(config=generator_config, console=MagicMock(), client=mock_client)


class TestComposeService:
    """Tests for ComposeService.generate."""

    @pytest.mark.asyncio
    async def test_success_returns_orchestrator(self, service: ComposeService):
        result = await service.generate(ComposeParams.from_cli(text=LAUNCH_INPUT))

        assert isinstance(result, Success)
        assert result.value is service.orchestrator
        assert result.value.store.editable == LAUNCH_POST

    @pytest.mark.asyncio
    async def test_rejected_maps_status_into_details(
        self,
        service: ComposeService,
        mock_client: AsyncMock,
    ):
        mock_client.generate.return_value = Failed(BackendRejected("HTTP 429", status_code=429))

        result = await service.generate(ComposeParams.from_cli(text=LAUNCH_INPUT))

        assert isinstance(result, Failure)
        assert result.error == "Failed to generate content. Please try again later."
        assert result.details == {"type": "BackendRejected", "reason": "HTTP 429", "status": 429}

    @pytest.mark.asyncio
    async def test_unreachable_has_no_status(self, service: ComposeService, mock_client: AsyncMock):
        mock_client.generate.return_value = Failed(BackendUnreachable("connection refused"))

        result = await service.generate(ComposeParams.from_cli(text=LAUNCH_INPUT))

        assert isinstance(result, Failure)
        assert "status" not in result.details

    @pytest.mark.asyncio
    async def test_validation_error_becomes_failure(self, service: ComposeService, mock_client: AsyncMock):
        result = await service.generate(ComposeParams.from_cli(text=""))

        assert isinstance(result, Failure)
        assert result.error == "Please enter some text first"
        mock_client.generate.assert_not_called()

    @pytest.mark.asyncio
    async def test_notifications_printed_to_console(self, service: ComposeService):
        await service.generate(ComposeParams.from_cli(text=LAUNCH_INPUT))

        printed = [call.args[0] for call in service.console.print.call_args_list]
        assert any("Content generated successfully!" in line for line in printed)
