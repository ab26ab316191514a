import pytest
import kmath as km


@pytest.fixture(autouse=True)
def _restore_error_mode():
    original = km.get_error_mode()
    km.set_error_mode(km.ErrorMode.STRICT)
    yield
    km.set_error_mode(original)
