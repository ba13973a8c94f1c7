from typing import Optional

from django.db import models

from core.snowflake import Snowflake
from users.models.domain import Domain


class Identity(models.Model):
    """
    A local or remote account that can author posts.
    """

    id = models.BigIntegerField(primary_key=True, default=Snowflake.generate_identity)

    local = models.BooleanField()
    users = models.ManyToManyField(
        "users.User",
        related_name="identities",
        blank=True,
    )

    username = models.CharField(max_length=500, blank=True, null=True)
    # Must be a display domain if present
    domain = models.ForeignKey(
        "users.Domain",
        blank=True,
        null=True,
        on_delete=models.PROTECT,
        related_name="identities",
    )

    name = models.CharField(max_length=500, blank=True, null=True)

    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = "identities"
        unique_together = [("username", "domain")]

    def __str__(self):
        return self.handle

    @classmethod
    def by_username_and_domain(
        cls, username: str, domain: str | None
    ) -> Optional["Identity"]:
        """
        Finds an identity we already know about by its handle parts.
        Never goes out to the network.
        """
        query = cls.objects.filter(username__iexact=username)
        if domain:
            domain_instance = Domain.get_domain(domain)
            if domain_instance is None:
                return None
            query = query.filter(domain=domain_instance)
        else:
            query = query.filter(local=True)
        return query.first()

    @property
    def handle(self):
        if self.username is None:
            return "(unknown user)"
        if self.domain_id:
            return f"{self.username}@{self.domain_id}"
        return f"{self.username}@(unknown server)"

    def to_mastodon_json(self):
        return {
            "id": str(self.pk),
            "username": self.username or "",
            "acct": self.username if self.local else self.handle,
            "display_name": self.name or "",
        }
