import pytest

import settings


@pytest.fixture(autouse=True)
def reset_precondition_policy():
    """Restore the global precondition policy after every test."""
    yield
    settings.set_precondition_policy(settings.PreconditionPolicy.REJECT)
