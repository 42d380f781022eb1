"""
Unit tests for the backend API client and endpoint catalogue.

HTTP traffic is mocked at the requests.Session level.
"""
import json
from unittest.mock import ANY, MagicMock, patch

import pytest
import requests

from invoice_dashboard.adapters.backend import BackendAPI, BackendAPIClient
from invoice_dashboard.errors import BackendError, ConfigurationError, UnauthorizedError


def make_response(status_code, body=None, url="http://backend.test/endpoint"):
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = b"" if body is None else json.dumps(body).encode()
    resp.url = url
    return resp


@pytest.fixture
def client():
    return BackendAPIClient(access_token="access-123")


class TestBackendAPIClientHeaders:

    def test_bearer_token_header(self, client):
        assert client.session.headers["Authorization"] == "Bearer access-123"
        assert client.session.headers["Content-Type"] == "application/json"

    def test_forwarded_authorization_header(self):
        """Route handlers pass the caller's header through untouched."""
        forwarding = BackendAPIClient(authorization="Bearer from-caller")
        assert forwarding.session.headers["Authorization"] == "Bearer from-caller"

    def test_no_credentials(self):
        assert "Authorization" not in BackendAPIClient().session.headers

    def test_base_url_from_environment(self, client):
        assert client.api_url == "http://backend.test"

    def test_missing_api_url(self, monkeypatch):
        monkeypatch.delenv("API_URL")
        with pytest.raises(ConfigurationError, match="API_URL is not defined."):
            BackendAPIClient()


class TestBackendAPIClientResponses:

    def test_get_builds_url_and_parses_json(self, client):
        with patch.object(client.session, "request", return_value=make_response(200, [{"id": "1"}])) as mock_request:
            assert client.get("customers/filtered", params={"query": "ev"}) == [{"id": "1"}]

        mock_request.assert_called_once_with(
            "GET",
            "http://backend.test/customers/filtered",
            params={"query": "ev"},
            json=None,
            timeout=10.0,
            verify=ANY,
        )

    @pytest.mark.parametrize("status", [401, 403])
    def test_unauthorized_statuses(self, client, status):
        with patch.object(client.session, "request", return_value=make_response(status)):
            with pytest.raises(UnauthorizedError) as exc_info:
                client.get("revenues")
        assert exc_info.value.status_code == status

    @pytest.mark.parametrize("status", [400, 404, 500, 502])
    def test_other_error_statuses(self, client, status):
        with patch.object(client.session, "request", return_value=make_response(status, {"detail": "x"})):
            with pytest.raises(BackendError) as exc_info:
                client.get("revenues")
        assert exc_info.value.status_code == status
        assert not isinstance(exc_info.value, UnauthorizedError)

    def test_empty_body_returns_none(self, client):
        with patch.object(client.session, "request", return_value=make_response(204)):
            assert client.delete("invoices/1") is None

    def test_invalid_json_raises_value_error(self, client):
        resp = make_response(200)
        resp._content = b"<html>oops</html>"
        with patch.object(client.session, "request", return_value=resp):
            with pytest.raises(ValueError, match="Invalid JSON response"):
                client.get("revenues")

    def test_network_errors_propagate(self, client):
        with patch.object(client.session, "request", side_effect=requests.ConnectionError("refused")):
            with pytest.raises(requests.ConnectionError):
                client.get("revenues")


class TestBackendAPIEndpoints:

    @pytest.fixture
    def http(self):
        return MagicMock(spec=BackendAPIClient)

    def test_filter_invoices_query_parameters(self, http):
        BackendAPI(http).filter_invoices("lee", page=2, limit=6, offset=6)
        http.get.assert_called_once_with(
            "invoices/filtered", params={"page": 2, "query": "lee", "limit": 6, "offset": 6}
        )

    def test_create_invoice_body(self, http):
        BackendAPI(http).create_invoice("c1", 15795, "paid")
        http.post.assert_called_once_with(
            "invoices", json={"customer_id": "c1", "amount": 15795, "status": "paid"}
        )

    def test_update_invoice_uses_patch(self, http):
        BackendAPI(http).update_invoice("i9", "c1", 100, "pending")
        http.patch.assert_called_once_with(
            "invoices/i9", json={"customer_id": "c1", "amount": 100, "status": "pending"}
        )

    def test_delete_invoice(self, http):
        BackendAPI(http).delete_invoice("i9")
        http.delete.assert_called_once_with("invoices/i9")

    def test_token_endpoints(self, http):
        api = BackendAPI(http)
        api.verify_token("acc")
        api.refresh_token("ref")
        http.post.assert_any_call("token/verify", json={"token": "acc"})
        http.post.assert_any_call("token/refresh", json={"refresh_token": "ref"})

    def test_empty_list_payloads_become_empty_lists(self, http):
        http.get.return_value = None
        assert BackendAPI(http).latest_invoices() == []
