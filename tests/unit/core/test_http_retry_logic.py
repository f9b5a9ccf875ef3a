# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from unittest.mock import MagicMock, Mock, patch
import pytest
import requests

from AzureDevOps.Tfvc.core._http import _HttpClient


class TestHttpClientRetryLogic:
    """Test retry logic in _HttpClient."""

    def test_default_configuration(self):
        client = _HttpClient()
        assert client.max_attempts == 5
        assert client.base_delay == 0.5
        assert client.max_backoff == 60.0
        assert client.jitter is True
        assert client.retry_transient_errors is True
        assert client.default_timeout is None

    def test_custom_configuration(self):
        client = _HttpClient(retries=3, backoff=1.0, max_backoff=30.0, jitter=False, retry_transient_errors=False)
        assert client.max_attempts == 3
        assert client.base_delay == 1.0
        assert client.max_backoff == 30.0
        assert client.jitter is False
        assert client.retry_transient_errors is False

    @patch("requests.request")
    def test_successful_request_no_retry(self, mock_request):
        mock_request.return_value = Mock(status_code=200, headers={})

        client = _HttpClient()
        response = client._request("GET", "https://test.example.com")

        assert response.status_code == 200
        assert mock_request.call_count == 1

    @patch("requests.request")
    @patch("time.sleep")
    def test_network_error_retry(self, mock_sleep, mock_request):
        """Network errors (RequestException) are retried with exponential backoff."""
        mock_request.side_effect = [
            requests.exceptions.ConnectionError("Network error"),
            requests.exceptions.ConnectionError("Network error"),
            Mock(status_code=200, headers={}),
        ]

        client = _HttpClient(jitter=False)
        response = client._request("GET", "https://test.example.com")

        assert response.status_code == 200
        assert mock_request.call_count == 3
        assert mock_sleep.call_count == 2
        mock_sleep.assert_any_call(0.5)
        mock_sleep.assert_any_call(1.0)

    @patch("requests.request")
    @patch("time.sleep")
    def test_transient_http_error_retry(self, mock_sleep, mock_request):
        mock_request.side_effect = [Mock(status_code=429, headers={}), Mock(status_code=200, headers={})]

        client = _HttpClient(jitter=False)
        response = client._request("GET", "https://test.example.com")

        assert response.status_code == 200
        assert mock_request.call_count == 2
        mock_sleep.assert_called_once_with(0.5)

    @patch("requests.request")
    @patch("time.sleep")
    def test_discarded_transient_response_closed(self, mock_sleep, mock_request):
        throttled = Mock(status_code=503, headers={})
        mock_request.side_effect = [throttled, Mock(status_code=200, headers={})]

        client = _HttpClient(jitter=False)
        response = client._request("GET", "https://test.example.com", stream=True)

        assert response.status_code == 200
        throttled.close.assert_called_once_with()
        response.close.assert_not_called()

    @patch("requests.request")
    @patch("time.sleep")
    def test_retry_after_header_respected(self, mock_sleep, mock_request):
        mock_request.side_effect = [
            Mock(status_code=503, headers={"Retry-After": "5"}),
            Mock(status_code=200, headers={}),
        ]

        client = _HttpClient(jitter=False)
        client._request("GET", "https://test.example.com")

        mock_sleep.assert_called_once_with(5)

    @patch("requests.request")
    @patch("time.sleep")
    def test_retry_after_header_capped_at_max_backoff(self, mock_sleep, mock_request):
        mock_request.side_effect = [
            Mock(status_code=429, headers={"Retry-After": "120"}),
            Mock(status_code=200, headers={}),
        ]

        client = _HttpClient(jitter=False, max_backoff=30.0)
        client._request("GET", "https://test.example.com")

        mock_sleep.assert_called_once_with(30.0)

    @patch("requests.request")
    @patch("time.sleep")
    def test_invalid_retry_after_header_fallback(self, mock_sleep, mock_request):
        mock_request.side_effect = [
            Mock(status_code=429, headers={"Retry-After": "invalid"}),
            Mock(status_code=200, headers={}),
        ]

        client = _HttpClient(jitter=False)
        client._request("GET", "https://test.example.com")

        mock_sleep.assert_called_once_with(0.5)

    @patch("requests.request")
    def test_non_transient_error_no_retry(self, mock_request):
        mock_request.return_value = Mock(status_code=404, headers={})

        client = _HttpClient()
        response = client._request("GET", "https://test.example.com")

        assert response.status_code == 404
        assert mock_request.call_count == 1

    @patch("requests.request")
    @patch("time.sleep")
    def test_retry_disabled_for_transient_errors(self, mock_sleep, mock_request):
        mock_request.return_value = Mock(status_code=429, headers={})

        client = _HttpClient(retry_transient_errors=False)
        response = client._request("GET", "https://test.example.com")

        assert response.status_code == 429
        assert mock_request.call_count == 1
        assert mock_sleep.call_count == 0

    @patch("requests.request")
    @patch("time.sleep")
    def test_last_transient_response_returned_when_attempts_exhausted(self, mock_sleep, mock_request):
        mock_request.return_value = Mock(status_code=503, headers={})

        client = _HttpClient(retries=3, jitter=False)
        response = client._request("GET", "https://test.example.com")

        assert response.status_code == 503
        assert mock_request.call_count == 3
        assert mock_sleep.call_count == 2

    @patch("requests.request")
    @patch("time.sleep")
    def test_max_attempts_respected(self, mock_sleep, mock_request):
        mock_request.side_effect = requests.exceptions.ConnectionError("Network error")

        client = _HttpClient(retries=2, jitter=False)

        with pytest.raises(requests.exceptions.ConnectionError):
            client._request("GET", "https://test.example.com")

        assert mock_request.call_count == 2
        assert mock_sleep.call_count == 1

    @patch("requests.request")
    @patch("time.sleep")
    def test_exponential_backoff_capped(self, mock_sleep, mock_request):
        mock_request.side_effect = [
            requests.exceptions.ConnectionError("Network error"),
            requests.exceptions.ConnectionError("Network error"),
            requests.exceptions.ConnectionError("Network error"),
            Mock(status_code=200, headers={}),
        ]

        client = _HttpClient(retries=4, backoff=10.0, max_backoff=15.0, jitter=False)
        client._request("GET", "https://test.example.com")

        delays = [c[0][0] for c in mock_sleep.call_args_list]
        assert delays == [10.0, 15.0, 15.0]

    @patch("requests.request")
    @patch("time.sleep")
    @patch("random.uniform")
    def test_jitter_applied(self, mock_uniform, mock_sleep, mock_request):
        mock_uniform.return_value = 0.1
        mock_request.side_effect = [
            requests.exceptions.ConnectionError("Network error"),
            Mock(status_code=200, headers={}),
        ]

        client = _HttpClient(jitter=True, backoff=1.0)
        client._request("GET", "https://test.example.com")

        mock_uniform.assert_called_with(-0.25, 0.25)
        mock_sleep.assert_called_with(1.1)

    @patch("requests.request")
    def test_method_specific_timeouts(self, mock_request):
        mock_request.return_value = Mock(status_code=200, headers={})
        client = _HttpClient()

        client._request("GET", "https://test.example.com")
        assert mock_request.call_args[1]["timeout"] == 10

        client._request("OPTIONS", "https://test.example.com")
        assert mock_request.call_args[1]["timeout"] == 10

        client._request("POST", "https://test.example.com")
        assert mock_request.call_args[1]["timeout"] == 120

        client._request("DELETE", "https://test.example.com")
        assert mock_request.call_args[1]["timeout"] == 120

    @patch("requests.request")
    def test_custom_timeout_respected(self, mock_request):
        mock_request.return_value = Mock(status_code=200, headers={})

        client = _HttpClient(timeout=30.0)
        client._request("GET", "https://test.example.com")

        assert mock_request.call_args[1]["timeout"] == 30.0

    @patch("requests.request")
    def test_explicit_timeout_kwarg_wins(self, mock_request):
        mock_request.return_value = Mock(status_code=200, headers={})

        client = _HttpClient(timeout=30.0)
        client._request("GET", "https://test.example.com", timeout=3)

        assert mock_request.call_args[1]["timeout"] == 3


class TestHttpClientSession:
    """Session reuse and cleanup."""

    @patch("requests.request")
    def test_session_used_when_provided(self, mock_request):
        session = MagicMock(spec=requests.Session)
        session.request.return_value = Mock(status_code=200, headers={})

        client = _HttpClient(session=session)
        client._request("GET", "https://test.example.com", stream=True)

        session.request.assert_called_once()
        assert session.request.call_args[1]["stream"] is True
        mock_request.assert_not_called()

    def test_close_closes_session_once(self):
        session = MagicMock(spec=requests.Session)
        client = _HttpClient(session=session)

        client.close()
        client.close()

        session.close.assert_called_once()
        assert client._session is None
