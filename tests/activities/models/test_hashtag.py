import pytest

from activities.models import Hashtag


@pytest.mark.django_db
def test_ensure():
    Hashtag.objects.create(hashtag="existing")
    hashtags = Hashtag.ensure(["existing", "Brand_New", "x" * 150])
    assert [h.hashtag for h in hashtags] == ["existing", "brand_new", "x" * 100]
    assert Hashtag.objects.count() == 3
