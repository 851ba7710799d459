import pytest

pytest.register_assert_rewrite("stream_more.testing")

from tests.testing.invoker import sync_or_async  # noqa: E402

# Mark these imports as used so they don't get removed.
# They need to be imported in `conftest.py` so the fixtures are registered.
_ = (sync_or_async,)
