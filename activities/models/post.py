from typing import Optional

import urlman
from django.conf import settings
from django.db import DatabaseError, models, transaction
from django.utils import timezone

from core.exceptions import NotFoundError, StorageError
from core.snowflake import Snowflake


class Post(models.Model):
    """
    A post (status, toot) written by one of our identities.
    """

    class Visibilities(models.IntegerChoices):
        public = 0
        local_only = 4
        unlisted = 1
        followers = 2
        mentioned = 3

    id = models.BigIntegerField(primary_key=True, default=Snowflake.generate_post)

    # The author (attributedTo) of the post
    author = models.ForeignKey(
        "users.Identity",
        on_delete=models.CASCADE,
        related_name="posts",
    )

    # Who should be able to see this Post
    visibility = models.IntegerField(
        choices=Visibilities.choices,
        default=Visibilities.public,
    )

    # What most viewers see; truncated for monologues
    content = models.TextField()

    # The untruncated text, only kept for monologues
    full_content = models.TextField(blank=True, default="")

    # If the contents of the post are sensitive, and the summary (content
    # warning) to show if it is
    sensitive = models.BooleanField(default=False)
    summary = models.TextField(blank=True, null=True)

    language = models.CharField(max_length=20, blank=True, null=True)

    # The client application it was posted from
    application = models.ForeignKey(
        "api.Application",
        blank=True,
        null=True,
        on_delete=models.SET_NULL,
        related_name="posts",
    )

    # The Post it is replying to
    in_reply_to = models.ForeignKey(
        "self",
        blank=True,
        null=True,
        on_delete=models.SET_NULL,
        related_name="replies",
    )

    # The identities mentioned in the post
    mentions = models.ManyToManyField(
        "users.Identity",
        related_name="posts_mentioning",
        blank=True,
    )

    # Hashtags in the post
    hashtags = models.ManyToManyField(
        "activities.Hashtag",
        related_name="posts",
        blank=True,
    )

    published = models.DateTimeField(default=timezone.now)

    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(
                fields=["visibility", "published"],
                name="ix_post_visibility_published",
            ),
        ]

    class urls(urlman.Urls):
        view = "/@{self.author.username}/{self.id}/"
        admin_edit = "/djadmin/activities/post/{self.id}/change/"

        def get_scheme(self, url):
            return "https" if settings.SETUP.LOCAL_HTTPS else "http"

        def get_hostname(self, url):
            if self.instance.author.domain_id:
                return self.instance.author.domain.uri_domain
            return settings.MAIN_DOMAIN

    def __str__(self):
        return f"{self.author} #{self.id}"

    def get_absolute_url(self):
        return self.urls.view

    @property
    def is_local_only(self) -> bool:
        return self.visibility == self.Visibilities.local_only

    @property
    def is_reply(self) -> bool:
        return self.in_reply_to_id is not None

    @classmethod
    def by_id(cls, post_id: int) -> "Post":
        """
        Fetches a Post along with what the pipeline needs from its author
        """
        try:
            return cls.objects.select_related("author", "author__domain").get(
                pk=post_id
            )
        except cls.DoesNotExist:
            raise NotFoundError(f"Post {post_id} does not exist")

    ### Local creation ###

    @classmethod
    def create_with_media(
        cls,
        attachments: Optional[list] = None,
        monologue: bool = False,
        **fields,
    ) -> "Post":
        """
        Inserts the Post and claims its attachments in one transaction.

        Attachments are linked only if they are still unlinked; losing that
        race raises a ValidationError and nothing is kept. Any database
        failure comes out as a StorageError, again with nothing kept.
        """
        try:
            with transaction.atomic():
                post = cls.objects.create(**fields)
                if monologue:
                    post.append_permalink()
                for attachment in attachments or []:
                    attachment.attach_to(post)
        except DatabaseError as e:
            raise StorageError(f"Could not save post: {e}") from e
        return post

    def append_permalink(self):
        """
        Points readers of a truncated monologue at the full version.
        This is the only edit a Post ever gets after it is inserted.
        """
        self.content += f"\n\nView the full post: {self.urls.view.full()}"
        Post.objects.filter(pk=self.pk).update(content=self.content)

    ### Mastodon Client API ###

    def to_mastodon_json(self):
        visibility_mapping = {
            self.Visibilities.public: "public",
            self.Visibilities.unlisted: "unlisted",
            self.Visibilities.followers: "private",
            self.Visibilities.mentioned: "direct",
            self.Visibilities.local_only: "public",
        }
        return {
            "id": str(self.pk),
            "uri": self.urls.view.full(),
            "created_at": format_api_date(self.published),
            "account": self.author.to_mastodon_json(),
            "content": self.content,
            "text": self.full_content or self.content,
            "visibility": visibility_mapping[self.visibility],
            "local_only": self.is_local_only,
            "sensitive": self.sensitive,
            "spoiler_text": self.summary or "",
            "language": self.language,
            "media_attachments": [
                attachment.to_mastodon_json() for attachment in self.attachments.all()
            ],
            "mentions": [
                {
                    "id": str(identity.pk),
                    "username": identity.username or "",
                    "acct": identity.handle,
                }
                for identity in self.mentions.all()
            ],
            "tags": [{"name": tag.hashtag} for tag in self.hashtags.all()],
            "url": self.urls.view.full(),
            "in_reply_to_id": (
                str(self.in_reply_to_id) if self.in_reply_to_id else None
            ),
            "in_reply_to_account_id": (
                str(self.in_reply_to.author_id) if self.in_reply_to else None
            ),
            "application": (
                self.application.to_mastodon_json() if self.application else None
            ),
        }


def format_api_date(value) -> str:
    # Millisecond precision, as Mastodon's API returns it
    return value.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
