"""
Tests for response envelopes
"""
from seam_rpc.rpc.envelope import failure, serialize_error, success
from seam_rpc.rpc.errors import INTERNAL_ERROR, INVALID_REQUEST, RpcError


class ServiceError(Exception):
    def __init__(self, message, retry_after):
        super().__init__(message)
        self.retry_after = retry_after
        self._internal = "stack state"


class TestEnvelopes:
    """Test success and failure envelopes"""

    def test_success(self):
        assert success({"id": 7}, 5) == {"jsonrpc": "2.0", "id": 7, "result": 5}

    def test_success_null_result(self):
        assert success({"id": "x"}, None) == {"jsonrpc": "2.0", "id": "x", "result": None}

    def test_failure_keeps_protocol_error(self):
        error = {"code": INVALID_REQUEST, "message": "The id member is missing"}

        assert failure({"id": 3}, error) == {"jsonrpc": "2.0", "id": 3, "error": error}

    def test_failure_without_id(self):
        assert failure({}, {"code": INVALID_REQUEST, "message": "x"})["id"] is None

    def test_failure_for_non_object_request(self):
        assert failure("garbage", {"code": INVALID_REQUEST, "message": "x"})["id"] is None


class TestSerializeError:
    """Test error flattening"""

    def test_rpc_error(self):
        assert serialize_error(RpcError(-32000, "Busy")) == {"code": -32000, "message": "Busy"}

    def test_rpc_error_with_data(self):
        error = RpcError(-32000, "Busy", {"retry": 3})
        assert serialize_error(error) == {"code": -32000, "message": "Busy", "data": {"retry": 3}}

    def test_exception(self):
        serialized = serialize_error(ValueError("bad value"))

        assert serialized == {"code": INTERNAL_ERROR, "message": "bad value", "name": "ValueError"}

    def test_exception_public_fields(self):
        serialized = serialize_error(ServiceError("overloaded", retry_after=5))

        assert serialized["message"] == "overloaded"
        assert serialized["name"] == "ServiceError"
        assert serialized["retry_after"] == 5
        assert "_internal" not in serialized

    def test_exception_without_message(self):
        assert serialize_error(KeyError())["message"] == "KeyError"

    def test_exception_with_integer_code(self):
        error = Exception("teapot")
        error.code = 418

        assert serialize_error(error)["code"] == 418

    def test_mapping_without_code_or_message(self):
        serialized = serialize_error({"reason": "x"})

        assert serialized == {"code": INTERNAL_ERROR, "message": "Internal error", "reason": "x"}

    def test_mapping_with_message_only(self):
        assert serialize_error({"message": "quota"}) == {"code": INTERNAL_ERROR, "message": "quota"}

    def test_plain_value(self):
        assert serialize_error("failed") == {"code": INTERNAL_ERROR, "message": "failed"}
