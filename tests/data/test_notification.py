"""
Tests for notification parsing and acknowledgments
"""
import json

import pytest

from trustly_client.data.notification import NotificationRequest, NotificationResponse
from trustly_client.exceptions import DataError, JSONRPCVersionError

NOTIFICATION = {
    "method": "credit",
    "version": "1.1",
    "params": {
        "uuid": "258a2184-2842-b485-25ca-293525152425",
        "signature": "R9+hjuMqbsH0Ku",
        "data": {
            "orderid": "2190971587",
            "amount": "100.00",
            "attributes": {"payerid": "123"},
        },
    },
}


class TestNotificationRequest:
    """Test notification parsing"""

    def test_from_json_text(self):
        """Test raw JSON bodies are parsed"""
        request = NotificationRequest(json.dumps(NOTIFICATION))
        assert request.version == "1.1"
        assert request.method == "credit"
        assert request.uuid == "258a2184-2842-b485-25ca-293525152425"
        assert request.signature == "R9+hjuMqbsH0Ku"
        assert request.data_at("orderid") == "2190971587"
        assert request.attribute_at("payerid") == "123"
        assert request.data == NOTIFICATION["params"]["data"]

    def test_from_bytes(self):
        """Test raw bytes bodies are parsed"""
        request = NotificationRequest(json.dumps(NOTIFICATION).encode("utf-8"))
        assert request.method == "credit"

    def test_from_mapping_stringifies_keys(self):
        """Test non-string keys in mappings are converted"""
        body = {"method": "credit", "version": "1.1", "params": {"data": {1: "one"}}}
        request = NotificationRequest(body)
        assert request.data_at("1") == "one"

    def test_mapping_not_shared(self):
        """Test the notification owns its payload"""
        body = json.loads(json.dumps(NOTIFICATION))
        request = NotificationRequest(body)
        body["params"]["data"]["orderid"] = "changed"
        assert request.data_at("orderid") == "2190971587"

    def test_missing_fields(self):
        """Test absent fields read as None"""
        request = NotificationRequest({"version": "1.1"})
        assert request.method is None
        assert request.uuid is None
        assert request.data_at("orderid") is None
        assert request.attribute_at("payerid") is None

    def test_malformed_json(self):
        """Test parser errors surface as DataError"""
        with pytest.raises(DataError) as exc_info:
            NotificationRequest("{not json")
        assert "Expecting property name" in str(exc_info.value)

    def test_non_object_json(self):
        """Test JSON that is not an object is rejected"""
        with pytest.raises(DataError):
            NotificationRequest("[1, 2]")

    @pytest.mark.parametrize("version", ["1.0", "2.0", 1.1])
    def test_unsupported_version(self, version):
        """Test the version appears in the error message"""
        body = dict(NOTIFICATION, version=version)
        with pytest.raises(JSONRPCVersionError) as exc_info:
            NotificationRequest(body)
        assert str(exc_info.value) == f"JSON RPC Version {version} is not supported"

    def test_missing_version(self):
        """Test a missing version is rejected"""
        with pytest.raises(JSONRPCVersionError, match="JSON RPC Version None is not supported"):
            NotificationRequest({"method": "credit"})


class TestNotificationResponse:
    """Test acknowledgment construction"""

    def test_success(self):
        """Test an OK acknowledgment mirrors the request"""
        request = NotificationRequest(NOTIFICATION)
        response = NotificationResponse(request, success=True)
        assert response.payload.to_dict() == {
            "version": "1.1",
            "result": {
                "uuid": "258a2184-2842-b485-25ca-293525152425",
                "method": "credit",
                "data": {"status": "OK"},
            },
        }
        assert response.status == "OK"
        assert response.data == {"status": "OK"}

    def test_failure(self):
        """Test a FAILED acknowledgment"""
        response = NotificationResponse(NotificationRequest(NOTIFICATION), success=False)
        assert response.data == {"status": "FAILED"}

    def test_missing_uuid_and_method(self):
        """Test uuid and method are only copied when present"""
        response = NotificationResponse(NotificationRequest({"version": "1.1"}))
        assert response.result == {"data": {"status": "OK"}}
        assert response.uuid is None
        assert response.method is None

    def test_setters_write_result(self):
        """Test field setters write into result"""
        response = NotificationResponse(NotificationRequest(NOTIFICATION))
        response.signature = "sig"
        response.method = "debit"
        response.uuid = "u"
        assert response.result["signature"] == "sig"
        assert response.signature == "sig"
        assert response.method == "debit"
        assert response.uuid == "u"
        assert json.loads(response.to_json())["result"]["signature"] == "sig"
