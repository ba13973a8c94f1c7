import logging

from django.conf import settings

logger = logging.getLogger(__name__)


class SubmissionError(Exception):
    """
    A problem creating a Post that the caller should hear about
    """


class ValidationError(SubmissionError):
    """
    The submission was rejected before anything was written
    """

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.message = message
        self.code = code


class StorageError(SubmissionError):
    """
    The transactional write failed; nothing was persisted, so it is safe to
    retry with the same idempotency key.
    """


class NotFoundError(SubmissionError):
    """
    Something we had a reference to no longer exists
    """


def capture_message(message: str, level: str | None = None, scope=None, **scope_args):
    """
    Sends the informational message to Sentry if it's configured
    """
    if settings.SETUP.SENTRY_DSN and settings.SETUP.SENTRY_CAPTURE_MESSAGES:
        from sentry_sdk import capture_message

        capture_message(message, level, scope, **scope_args)
    else:
        logger.info(message)


def capture_exception(exception: BaseException, scope=None, **scope_args):
    """
    Sends the exception to Sentry if it's configured. Callers log it themselves
    """
    if settings.SETUP.SENTRY_DSN:
        from sentry_sdk import capture_exception

        capture_exception(exception, scope, **scope_args)
