import logging

import pytest

from arithmetic_tree.logging_system import LogLevel, configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
  """Each test starts with a silent global logger and leaves no open handlers behind"""
  configure_logging(LogLevel.SILENT)
  yield
  for handler in logging.getLogger('arithmetic_tree').handlers:
    handler.close()
  configure_logging(LogLevel.SILENT)
