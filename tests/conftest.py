import pytest
import pytest_asyncio

from gymtrack.services.tracker import GymTracker


@pytest.fixture(name="database_url")
def database_url_fixture(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'gymtrack.db'}"


@pytest_asyncio.fixture(name="tracker")
async def tracker_fixture(database_url: str):
    tracker = GymTracker(database_url)
    await tracker.init()
    yield tracker
    await tracker.close()


@pytest.fixture(name="lazy_tracker")
def lazy_tracker_fixture(database_url: str) -> GymTracker:
    """An unopened tracker; it opens inside whichever event loop first uses it."""
    return GymTracker(database_url)
