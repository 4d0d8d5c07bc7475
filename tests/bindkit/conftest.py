from __future__ import annotations

import pytest

from bindkit.dom.headless import HeadlessDocument, HeadlessViewport
from bindkit.runtime.frames import ManualFrameSource
from bindkit.runtime.scheduler import Scheduler
from tests.bindkit.fakes import StubHost, build_test_page

REQUIRED = ("_host_resize", "_host_clear", "_host_add")


@pytest.fixture
def page() -> HeadlessDocument:
    return build_test_page()


@pytest.fixture
def viewport() -> HeadlessViewport:
    return HeadlessViewport(device_pixel_ratio=1.0)


@pytest.fixture
def scheduler() -> Scheduler:
    return Scheduler()


@pytest.fixture
def frames() -> ManualFrameSource:
    return ManualFrameSource()


@pytest.fixture
def ready_host() -> StubHost:
    return StubHost(REQUIRED)
