import logging

import pytest

from globprompt.logging_setup import configure_logging


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


def test_logs_only_to_the_file(tmp_path, restore_root):
    restore_root.addHandler(logging.StreamHandler())
    log_file = tmp_path / "globprompt.log"

    handler = configure_logging(str(log_file), level=logging.DEBUG)
    logging.getLogger("globprompt.test").debug("query issued")
    handler.flush()

    assert restore_root.handlers == [handler]
    assert "globprompt.test - DEBUG - query issued" in log_file.read_text()
