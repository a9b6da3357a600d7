"""
Tests for parameter name extraction
"""
import pytest

from seam_rpc.rpc.errors import ExtractionError
from seam_rpc.rpc.introspection import parameter_names


class TestParameterNames:
    """Test parameter name extraction"""

    def test_function_param_names(self):
        def fn(a, b, c, d):
            pass

        assert parameter_names(fn) == ["a", "b", "c", "d"]

    def test_ignores_comments(self):
        def fn(a,  # first
               b,  # second
               c, d):
            pass

        assert parameter_names(fn) == ["a", "b", "c", "d"]

    def test_annotations_and_defaults(self):
        def fn(items: "dict[str, int]", limit: int = 10, *args, done=None, **kwargs):
            pass

        assert parameter_names(fn) == ["items", "limit", "args", "done", "kwargs"]

    def test_no_params(self):
        assert parameter_names(lambda: None) == []

    def test_lambda(self):
        assert parameter_names(lambda x, y, done: None) == ["x", "y", "done"]

    def test_bound_method_skips_receiver(self):
        class Service:
            def add(self, a, b, done):
                pass

        assert parameter_names(Service().add) == ["a", "b", "done"]

    def test_symmetric_marker_stripped(self):
        def fn(_unused_, value, done):
            pass

        assert parameter_names(fn) == ["unused", "value", "done"]

    def test_asymmetric_marker_kept(self):
        def fn(_private, value_):
            pass

        assert parameter_names(fn) == ["_private", "value_"]

    def test_unparsable_callable(self):
        class Opaque:
            __signature__ = 42

            def __call__(self):
                pass

        with pytest.raises(ExtractionError):
            parameter_names(Opaque())
