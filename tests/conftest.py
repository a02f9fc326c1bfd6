import pytest

from tran_receiver.models.config import UIConfig
from tran_receiver.tui.receiver import ReceiverUI


@pytest.fixture
def config():
    """Plain-text configuration so frames can be compared as strings."""
    return UIConfig(color=False)


@pytest.fixture
def ui(config):
    return ReceiverUI(config)
