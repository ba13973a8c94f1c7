import enum
import logging
from typing import Any

import pydantic
from django.db import transaction

from activities.models import Post
from activities.services.distribution import DistributionService
from activities.services.idempotency import IdempotencyStore
from activities.services.media import MediaValidator
from activities.services.processing import (
    HashtagProcessor,
    LanguageDetector,
    MentionProcessor,
    PostProcessor,
)
from activities.services.text import normalize
from api.models import Application
from core.exceptions import (
    NotFoundError,
    SubmissionError,
    ValidationError,
    capture_exception,
)
from core.models import Config
from users.models import Identity

logger = logging.getLogger(__name__)


class SubmissionStages(enum.Enum):
    checking_idempotency = "checking_idempotency"
    normalizing = "normalizing"
    validating_media = "validating_media"
    committing = "committing"
    dispatching = "dispatching"
    recording_idempotency = "recording_idempotency"
    done = "done"
    rejected = "rejected"


class SubmissionOptions(pydantic.BaseModel):
    """
    Everything about a new Post other than its author, text and parent.
    """

    # Keep the full text locally and show a truncated version to everyone else
    monologue: bool = False
    # None means "use the author's default"
    sensitive: bool | None = None
    visibility: Post.Visibilities | None = None
    spoiler_text: str | None = None
    # Only a list or tuple counts; anything else means no media
    media_ids: Any = None
    application: Application | None = None
    idempotency: str | None = None
    language: str | None = None

    class Config:
        arbitrary_types_allowed = True


class PostSubmissionService:
    """
    Turns a submission from one of our identities into a committed Post and
    queues its distribution.

    Replays of an idempotency key within its TTL get the original Post back
    and nothing else happens. The key check and the key write are separate
    round trips, so two identical submissions racing each other can still
    both create a Post.
    """

    def __init__(
        self,
        idempotency: IdempotencyStore | None = None,
        media_validator: MediaValidator | None = None,
        distribution: DistributionService | None = None,
        language_detector: LanguageDetector | None = None,
        processors: list[PostProcessor] | None = None,
    ):
        self.idempotency = idempotency or IdempotencyStore()
        self.media_validator = media_validator or MediaValidator()
        self.distribution = distribution or DistributionService()
        self.language_detector = language_detector or LanguageDetector()
        if processors is None:
            processors = [MentionProcessor(), HashtagProcessor()]
        self.processors = processors

    def submit(
        self,
        author: Identity,
        text: str,
        reply_to: Post | None = None,
        options: SubmissionOptions | None = None,
    ) -> Post:
        options = options or SubmissionOptions()
        token = options.idempotency or None
        self.enter(SubmissionStages.checking_idempotency, author)
        if token:
            existing = self.find_existing(author, token)
            if existing is not None:
                logger.info(
                    "Replayed submission %s by %s, returning post %s",
                    token,
                    author,
                    existing.pk,
                )
                self.enter(SubmissionStages.done, author)
                return existing
        try:
            post = self.create(author, text, reply_to, options)
        except SubmissionError as e:
            self.enter(SubmissionStages.rejected, author)
            logger.info("Submission by %s rejected: %s", author, e)
            raise
        self.run_processors(post)
        self.enter(SubmissionStages.dispatching, author)
        self.distribution.distribute(post)
        if token:
            self.enter(SubmissionStages.recording_idempotency, author)
            self.idempotency.record(author.pk, token, post.pk)
        self.enter(SubmissionStages.done, author)
        return post

    def find_existing(self, author: Identity, token: str) -> Post | None:
        post_id = self.idempotency.lookup(author.pk, token)
        if post_id is None:
            return None
        try:
            return Post.by_id(post_id)
        except NotFoundError:
            logger.info("Idempotency key %s points at a missing post", token)
            return None

    def create(
        self,
        author: Identity,
        text: str,
        reply_to: Post | None,
        options: SubmissionOptions,
    ) -> Post:
        self.enter(SubmissionStages.normalizing, author)
        normalized = normalize(text, monologue=options.monologue)
        author_config = Config.load_identity(author)
        visibility = options.visibility
        if visibility is None:
            visibility = author_config.default_post_visibility
        if visibility not in Post.Visibilities.values:
            raise ValidationError(
                f"Unknown visibility {visibility}", code="invalid_visibility"
            )
        # Maintain local-only for replies
        if reply_to and reply_to.is_local_only:
            visibility = Post.Visibilities.local_only
        sensitive = options.sensitive
        if sensitive is None:
            sensitive = author_config.default_post_sensitive
        summary = options.spoiler_text or None
        self.enter(SubmissionStages.validating_media, author)
        attachments = self.media_validator.validate(options.media_ids, author=author)
        self.enter(SubmissionStages.committing, author)
        return Post.create_with_media(
            attachments=attachments,
            monologue=options.monologue,
            author=author,
            content=normalized.content,
            full_content=normalized.full_content,
            in_reply_to=reply_to,
            visibility=visibility,
            sensitive=bool(summary) or sensitive,
            summary=summary,
            language=options.language or self.language_detector.detect(text, author),
            application=options.application,
        )

    def run_processors(self, post: Post):
        """
        Runs the post-commit processors. The Post already exists, so a
        failing processor is reported rather than raised.
        """
        for processor in self.processors:
            try:
                with transaction.atomic():
                    processor.process(post)
            except Exception as e:
                logger.warning(
                    "%s failed on post %s: %s",
                    type(processor).__name__,
                    post.pk,
                    e,
                    exc_info=e,
                )
                capture_exception(e)

    def enter(self, stage: SubmissionStages, author: Identity):
        logger.debug("Submission by %s: %s", author, stage.value)
