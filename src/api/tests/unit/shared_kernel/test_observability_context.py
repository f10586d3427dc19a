"""Unit tests for ObservationContext."""

from shared_kernel.observability_context import ObservationContext


class TestObservationContext:
    def test_as_dict_skips_unset_values(self):
        assert ObservationContext().as_dict() == {}

    def test_as_dict_includes_set_values_and_extra(self):
        context = ObservationContext(request_id="req-1", gateway="memory", extra={"page": 2})

        assert context.as_dict() == {"request_id": "req-1", "gateway": "memory", "page": 2}

    def test_with_gateway_returns_new_context(self):
        context = ObservationContext(actor="admin")

        updated = context.with_gateway("http")

        assert updated.gateway == "http"
        assert updated.actor == "admin"
        assert context.gateway is None

    def test_with_extra_merges(self):
        context = ObservationContext(extra={"a": 1}).with_extra(b=2)

        assert context.extra == {"a": 1, "b": 2}
