import logging

import pytest
from common.logging import RequestIdFilter
from common.request_id import get_request_id, reset_request_id, set_request_id
from rest_framework import status
from rest_framework.test import APIClient


@pytest.mark.django_db
class TestRequestIdMiddleware:
    def setup_method(self):
        self.client = APIClient()

    def test_generates_request_id(self):
        resp = self.client.get("/health/")

        assert resp.status_code == status.HTTP_200_OK
        assert resp.json() == {"success": True, "message": "Service is running"}
        assert len(resp["X-Request-ID"]) == 32

    def test_propagates_incoming_request_id(self):
        resp = self.client.get("/health/", HTTP_X_REQUEST_ID="req-123")

        assert resp["X-Request-ID"] == "req-123"

    def test_request_id_is_reset_after_response(self):
        self.client.get("/health/", HTTP_X_REQUEST_ID="req-456")

        assert get_request_id() == "-"


def test_request_id_filter_annotates_records():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

    set_request_id("abc")
    try:
        assert RequestIdFilter().filter(record) is True
    finally:
        reset_request_id()

    assert record.request_id == "abc"


@pytest.mark.django_db
def test_drf_errors_use_envelope(owner_client, job):
    resp = owner_client.post(f"/api/v1/jobs/{job.pk}/", {}, format="json")

    assert resp.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    assert resp.data["success"] is False
    assert "POST" in resp.data["message"]
