# tests/unit/chat/test_chat_factory.py

from unittest.mock import patch

import pytest

from fncall_kit.chat import ChatConfig, create_chat_client
from fncall_kit.chat.openai import OpenAIChatClient


class TestFactory:
    def test_create_openai_client(self) -> None:
        """Test creating OpenAI client."""
        with patch("fncall_kit.chat.openai.AsyncOpenAI"):
            config = ChatConfig(provider="openai", model="gpt-4o", api_key="test")
            client = create_chat_client(config)
            assert isinstance(client, OpenAIChatClient)

    def test_unknown_provider_raises(self) -> None:
        """Test that unknown provider raises ValueError."""
        config = ChatConfig(provider="unknown", model="model")  # type: ignore
        with pytest.raises(ValueError, match="Unknown chat provider"):
            create_chat_client(config)

    def test_config_values_passed_through(self) -> None:
        """Test that config values are passed to client."""
        with patch("fncall_kit.chat.openai.AsyncOpenAI") as mock_openai:
            config = ChatConfig(
                provider="openai",
                model="gpt-4-turbo",
                api_key="my-key",
                timeout=60.0,
                max_retries=5,
            )
            client = create_chat_client(config)

            assert client._model == "gpt-4-turbo"  # type: ignore[attr-defined]
            assert client._max_retries == 5  # type: ignore[attr-defined]
            mock_openai.assert_called_once_with(api_key="my-key", timeout=60.0)
