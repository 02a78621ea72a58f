"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from cloudkit.business import BearerCredential, BusinessService, ServiceConfig

# Skip all integration tests unless RUN_CLOUDKIT_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_CLOUDKIT_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_CLOUDKIT_NETWORK_TESTS=1 to run",
)


@pytest_asyncio.fixture
async def service():
    """Live service built from CLOUDKIT_BUSINESS_* environment variables."""
    if not os.environ.get("CLOUDKIT_BUSINESS_ACCESS_TOKEN"):
        pytest.skip("CLOUDKIT_BUSINESS_ACCESS_TOKEN is not set")
    async with BusinessService(
        BearerCredential.from_env(), config=ServiceConfig.from_env()
    ) as svc:
        yield svc
