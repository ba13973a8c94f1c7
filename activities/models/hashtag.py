from django.db import models


class Hashtag(models.Model):

    MAXIMUM_LENGTH = 100

    # Normalized hashtag without the '#'
    hashtag = models.SlugField(primary_key=True, max_length=100)

    created = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.hashtag

    @classmethod
    def ensure(cls, names: list[str]) -> list["Hashtag"]:
        """
        Returns Hashtag objects for each name, creating any we haven't seen
        """
        return [
            cls.objects.get_or_create(hashtag=name[: cls.MAXIMUM_LENGTH].lower())[0]
            for name in names
        ]
