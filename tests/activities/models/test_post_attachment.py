import pytest

from activities.models import Post, PostAttachment
from core.exceptions import ValidationError


@pytest.mark.django_db
def test_attach_to_claims_once(identity, other_identity):
    attachment = PostAttachment.objects.create(author=identity, mimetype="image/gif")
    post = Post.objects.create(author=identity, content="First")
    attachment.attach_to(post)
    assert attachment.post == post
    # A stale copy can't steal it
    stale = PostAttachment.objects.get(pk=attachment.pk)
    stale.post = None
    other_post = Post.objects.create(author=other_identity, content="Second")
    with pytest.raises(ValidationError):
        stale.attach_to(other_post)
    attachment.refresh_from_db()
    assert attachment.post == post


def test_kinds():
    assert PostAttachment(mimetype="image/webp").is_image()
    assert not PostAttachment(mimetype="image/webp").is_video()
    assert PostAttachment(mimetype="video/quicktime").is_video()
    assert not PostAttachment(mimetype="application/pdf").is_image()


def test_to_mastodon_json():
    attachment = PostAttachment(
        id=5, mimetype="image/png", name="alt text", width=200, height=100
    )
    data = attachment.to_mastodon_json()
    assert data["id"] == "5"
    assert data["type"] == "image"
    assert data["description"] == "alt text"
    assert data["meta"]["original"]["aspect"] == 2
