import logging

from jobgate.utils.logging import SecretMask, mask_secrets, setup_logger


def test_tokens_are_masked():
    assert mask_secrets("token apify_api_AbC123") == "token apify_api_***"
    assert mask_secrets("https://x/acts/a/run?token=s3cret&format=json") == "https://x/acts/a/run?token=***&format=json"
    assert mask_secrets("Authorization: Bearer s3cret") == "Authorization: Bearer ***"


def test_filter_masks_args():
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "calling %s", ("?token=abc",), None)
    SecretMask().filter(record)
    assert record.getMessage() == "calling ?token=***"


def test_setup_logger_single_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logger("DEBUG")
        setup_logger("DEBUG")
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
