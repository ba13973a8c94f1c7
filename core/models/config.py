import pydantic
from django.db import models


class Config(models.Model):
    """
    A configuration setting for a specific identity.

    The possible options and their defaults are defined at the bottom of the file.
    """

    key = models.CharField(max_length=500)

    identity = models.ForeignKey(
        "users.identity",
        related_name="configs",
        on_delete=models.CASCADE,
    )

    json = models.JSONField(blank=True, null=True)

    class Meta:
        unique_together = [
            ("key", "identity"),
        ]

    @classmethod
    def load_values(cls, options_class, filters):
        """
        Loads config options and returns an object with them
        """
        values = {}
        for config in cls.objects.filter(**filters):
            if config.json is not None:
                values[config.key] = config.json
        return options_class(**values)

    @classmethod
    def load_identity(cls, identity) -> "Config.IdentityOptions":
        """
        Loads an identity config options object
        """
        return cls.load_values(cls.IdentityOptions, {"identity": identity})

    @classmethod
    def set_identity(cls, identity, key, value):
        config_field = cls.IdentityOptions.__fields__[key]
        if value is None or value == config_field.default:
            cls.objects.filter(key=key, identity=identity).delete()
            return
        if not isinstance(value, config_field.type_):
            raise ValueError(f"Invalid type for {key}: {type(value)}")
        cls.objects.update_or_create(
            key=key,
            identity=identity,
            defaults={"json": value},
        )

    class IdentityOptions(pydantic.BaseModel):

        default_post_visibility: int = 0  # Post.Visibilities.public
        default_post_sensitive: bool = False
