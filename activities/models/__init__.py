from .hashtag import Hashtag  # noqa
from .post import Post  # noqa
from .post_attachment import PostAttachment  # noqa
