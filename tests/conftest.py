import pytest

from catalog.core.context import RequestContext


@pytest.fixture()
def ctx():
    """Fresh, uncancelled request context with a known correlation ID."""
    return RequestContext.new(correlation_id="test-correlation-id-fixture")
