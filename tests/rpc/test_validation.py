"""
Tests for request validation
"""
import pytest

from seam_rpc.rpc.definition import DEFINITION_METHOD, build_definition
from seam_rpc.rpc.errors import INVALID_REQUEST, METHOD_NOT_FOUND
from seam_rpc.rpc.validation import validate

DEFINITION = build_definition({
    "add": lambda a, b, done: done(None, a + b),
    "one": {"two": 1},
})


def request(**overrides):
    req = {"jsonrpc": "2.0", "id": 1, "method": "add", "params": [1, 2]}
    req.update(overrides)
    return req


class TestValidate:
    """Test validation checks and their order"""

    def test_valid_request(self):
        assert validate(DEFINITION, request()) is None

    def test_valid_value_leaf(self):
        assert validate(DEFINITION, request(method="one.two")) is None

    def test_version_mismatch(self):
        error = validate(DEFINITION, request(jsonrpc="1.0"))
        assert error["code"] == INVALID_REQUEST
        assert "version" in error["message"]

    def test_empty_request(self):
        assert validate(DEFINITION, {})["code"] == INVALID_REQUEST

    @pytest.mark.parametrize("req", [None, [], "request", 42])
    def test_non_object_request(self, req):
        assert validate(DEFINITION, req)["code"] == INVALID_REQUEST

    def test_missing_id(self):
        req = request()
        del req["id"]

        error = validate(DEFINITION, req)
        assert error["code"] == INVALID_REQUEST
        assert "id" in error["message"]

    def test_null_id_is_present(self):
        assert validate(DEFINITION, request(id=None)) is None

    def test_version_checked_before_id(self):
        req = request(jsonrpc="1.0")
        del req["id"]

        assert "version" in validate(DEFINITION, req)["message"]

    def test_method_not_found(self):
        assert validate(DEFINITION, request(method="missing"))["code"] == METHOD_NOT_FOUND

    def test_missing_method(self):
        req = request()
        del req["method"]

        assert validate(DEFINITION, req)["code"] == METHOD_NOT_FOUND

    def test_method_not_a_leaf(self):
        error = validate(DEFINITION, request(method="one"))
        assert error["code"] == INVALID_REQUEST
        assert "leaf" in error["message"]

    def test_definition_method_skips_lookup(self):
        assert validate(DEFINITION, request(method=DEFINITION_METHOD)) is None

    @pytest.mark.parametrize("params", [None, [], {}, {"a": 1}, (1, 2)])
    def test_accepted_params(self, params):
        assert validate(DEFINITION, request(params=params)) is None

    @pytest.mark.parametrize("params", [1, "a,b", True])
    def test_scalar_params_rejected(self, params):
        error = validate(DEFINITION, request(params=params))
        assert error["code"] == INVALID_REQUEST
        assert "params" in error["message"]
