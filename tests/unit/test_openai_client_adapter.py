from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from ideanest.evaluation.exceptions import EvaluationError, EvaluationNetworkError
from ideanest.evaluation.openai_client_adapter import OpenAIClientAdapter

_OPENAI_PATH = "ideanest.evaluation.openai_client_adapter.openai.OpenAI"


def _make_mock_response(content: str | None, finish_reason: str = "stop") -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    choice.finish_reason = finish_reason
    response = MagicMock()
    response.choices = [choice]
    return response


def _complete(adapter: OpenAIClientAdapter, system_prompt: str = "system") -> str:
    return adapter.create_chat_completion(
        model="m",
        temperature=0.1,
        max_tokens=512,
        system_prompt=system_prompt,
        user_prompt="user",
    )


class TestOpenAIClientAdapter:
    def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response('{"ok": true}')
        with patch(_OPENAI_PATH, return_value=mock_client):
            adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
            content = _complete(adapter)
        assert content == '{"ok": true}'

    def test_passes_client_settings(self) -> None:
        with patch(_OPENAI_PATH) as mock_openai:
            OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url="https://x/v1")
        mock_openai.assert_called_once_with(api_key="k", timeout=30, base_url="https://x/v1")

    def test_requests_json_object_output(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")
        with patch(_OPENAI_PATH, return_value=mock_client):
            _complete(OpenAIClientAdapter(api_key="k", timeout_seconds=30))
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["max_tokens"] == 512
        assert kwargs["messages"] == [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "user"},
        ]

    def test_omits_empty_system_prompt(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")
        with patch(_OPENAI_PATH, return_value=mock_client):
            _complete(OpenAIClientAdapter(api_key="k", timeout_seconds=30), system_prompt="")
        messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages == [{"role": "user", "content": "user"}]

    def test_raises_error_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(
            None, finish_reason="length"
        )
        with patch(_OPENAI_PATH, return_value=mock_client):
            adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
            with pytest.raises(EvaluationError, match="finish_reason=length"):
                _complete(adapter)

    def test_raises_error_for_no_choices(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = MagicMock(choices=[])
        with patch(_OPENAI_PATH, return_value=mock_client):
            adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
            with pytest.raises(EvaluationError, match="no choices"):
                _complete(adapter)

    def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with patch(_OPENAI_PATH, return_value=mock_client):
            adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
            with pytest.raises(EvaluationNetworkError, match="network error"):
                _complete(adapter)

    def test_raises_network_error_on_httpx_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.ReadTimeout("timed out")
        with patch(_OPENAI_PATH, return_value=mock_client):
            adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
            with pytest.raises(EvaluationNetworkError, match="timed out"):
                _complete(adapter)

    def test_wraps_api_errors(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            "quota exceeded", request=MagicMock(), body=None
        )
        with patch(_OPENAI_PATH, return_value=mock_client):
            adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
            with pytest.raises(EvaluationNetworkError, match="API error: quota exceeded"):
                _complete(adapter)
