import logging

from finance_tracker.logger import LOG_FORMAT, setup_logger


def test_setup_logger_does_not_stack_handlers():
    first = setup_logger('finance_tracker.test_logger', level='DEBUG')
    second = setup_logger('finance_tracker.test_logger', level=logging.WARNING)
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.WARNING
    assert second.handlers[0].formatter._fmt == LOG_FORMAT
