import logging
import uuid

from config.settings import mask_sensitive_data


class TestRequestIdMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get("/health")
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_request_id_on_api_responses(self, api_client_with_correlation):
        api_client, cid = api_client_with_correlation
        response = api_client.get("/api/products")
        assert response["X-Request-ID"] == cid

    def test_correlation_id_in_logs(self, client, caplog):
        custom_id = "log-test-correlation-456"
        with caplog.at_level(logging.INFO):
            client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        found = any(custom_id in record.getMessage() for record in caplog.records)
        assert found, (
            f"correlation_id '{custom_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )


class TestSensitiveDataMasking:
    def test_password_key_masked(self):
        event_dict = {"event": "test", "password": "s3cret123"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["password"] == "***MASKED***"

    def test_password_assignment_masked_in_value(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_non_sensitive_data_unchanged(self):
        event_dict = {"event": "product.created", "product_id": "0190-abc"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["product_id"] == "0190-abc"
        assert result["event"] == "product.created"

    def test_password_never_logged_on_create(self, api_client, caplog):
        payload = {
            "name": "Logged Product",
            "description": "desc",
            "manager": "manager",
            "password": "do-not-log-me",
        }
        with caplog.at_level(logging.DEBUG):
            api_client.post("/api/products", payload, format="json")
        assert all("do-not-log-me" not in r.getMessage() for r in caplog.records)
