import pytest

from modules.core.responses import Envelope, envelope

pytestmark = pytest.mark.unit


class TestEnvelope:
    def test_response_status_matches_body(self):
        response = envelope(201, "created", {"id": "abc"})
        assert response.status_code == 201
        assert response.data == {"status": 201, "message": "created", "data": {"id": "abc"}}

    def test_data_defaults_to_none(self):
        response = envelope(404, "missing")
        assert response.data["data"] is None

    def test_list_payload_kept(self):
        response = envelope(200, "ok", [])
        assert response.data["data"] == []

    def test_envelope_is_frozen(self):
        body = Envelope(status=200, message="ok")
        with pytest.raises(Exception):
            body.status = 500
