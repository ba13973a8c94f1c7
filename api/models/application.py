from django.db import models


class Application(models.Model):
    """
    OAuth applications; posts remember which one they were sent from.
    """

    client_id = models.CharField(max_length=500)
    client_secret = models.CharField(max_length=500)

    redirect_uris = models.TextField(blank=True, default="")
    scopes = models.TextField(default="read")

    name = models.CharField(max_length=500)
    website = models.CharField(max_length=500, blank=True, null=True)

    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name

    def to_mastodon_json(self):
        return {
            "name": self.name,
            "website": self.website,
        }
