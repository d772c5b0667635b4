"""Tests for container wiring."""

import asyncio

from nutrition_insights.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.insights_service.tip_generator.max_tips == settings.max_tips
    assert container.profile_service.default_timezone == "UTC"
    assert container.catalog.get("iron") is not None
    asyncio.run(container.close_resources())
