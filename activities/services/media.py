from activities.models import PostAttachment
from core.exceptions import ValidationError
from users.models import Identity


class MediaValidator:
    """
    Picks out the attachments a submission asked for and checks they can go
    on a single Post together.
    """

    MAXIMUM_ATTACHMENTS = 4

    TOO_MANY_MESSAGE = "Cannot attach more than 4 files."
    MIXED_MESSAGE = "Cannot attach a video to a post that already contains images."

    def validate(self, media_ids, author: Identity | None = None) -> list[PostAttachment]:
        """
        Returns the unlinked attachments to put on the Post, in the order
        they were requested. Anything that is not a list counts as no media;
        IDs that don't resolve to an unlinked attachment are skipped.
        """
        if not media_ids or not isinstance(media_ids, (list, tuple)):
            return []
        if len({str(media_id) for media_id in media_ids}) > self.MAXIMUM_ATTACHMENTS:
            raise ValidationError(self.TOO_MANY_MESSAGE, code="too_many_media")
        requested = []
        for media_id in media_ids[: self.MAXIMUM_ATTACHMENTS]:
            try:
                requested.append(int(media_id))
            except (TypeError, ValueError):
                continue
        queryset = PostAttachment.objects.filter(pk__in=requested, post__isnull=True)
        if author is not None:
            queryset = queryset.filter(author=author)
        attachments = sorted(queryset, key=lambda a: requested.index(a.pk))
        if len(attachments) > 1 and any(a.is_video() for a in attachments):
            raise ValidationError(self.MIXED_MESSAGE, code="images_and_video_mixed")
        return attachments
