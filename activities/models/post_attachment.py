from django.db import models

from core.exceptions import ValidationError


class PostAttachment(models.Model):
    """
    An attachment to a Post. Could be an image, a video, etc.

    Attachments are uploaded before the Post exists and sit unlinked until a
    Post claims them.
    """

    post = models.ForeignKey(
        "activities.post",
        on_delete=models.CASCADE,
        related_name="attachments",
        blank=True,
        null=True,
    )
    author = models.ForeignKey(
        "users.Identity",
        on_delete=models.CASCADE,
        related_name="attachments",
        blank=True,
        null=True,
    )

    mimetype = models.CharField(max_length=200)

    file = models.FileField(upload_to="attachments/%Y/%m/", null=True, blank=True)

    # This is the description for images, at least
    name = models.TextField(null=True, blank=True)

    width = models.IntegerField(null=True, blank=True)
    height = models.IntegerField(null=True, blank=True)
    blurhash = models.TextField(null=True, blank=True)

    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"#{self.pk} ({self.mimetype})"

    def is_image(self):
        return self.mimetype in [
            "image/apng",
            "image/avif",
            "image/gif",
            "image/jpeg",
            "image/png",
            "image/webp",
        ]

    def is_video(self):
        return self.mimetype in [
            "video/mp4",
            "video/ogg",
            "video/webm",
            "video/quicktime",
        ]

    def attach_to(self, post):
        """
        Links this attachment to the post, but only if nothing else has
        claimed it first.
        """
        claimed = PostAttachment.objects.filter(pk=self.pk, post__isnull=True).update(
            post=post
        )
        if not claimed:
            raise ValidationError(
                "Media is already attached to another post.",
                code="media_already_attached",
            )
        self.post = post

    ### Mastodon Client API ###

    def to_mastodon_json(self):
        if self.is_image():
            type_ = "image"
        elif self.is_video():
            type_ = "video"
        else:
            type_ = "unknown"
        url = self.file.url if self.file else ""
        value = {
            "id": str(self.pk),
            "type": type_,
            "url": url,
            "preview_url": url,
            "remote_url": None,
            "meta": {},
            "description": self.name,
            "blurhash": self.blurhash,
        }
        if self.width and self.height:
            value["meta"]["original"] = {
                "width": self.width,
                "height": self.height,
                "size": f"{self.width}x{self.height}",
                "aspect": self.width / self.height,
            }
        return value
