import logging

import pytest

from activities.models import Post
from activities.services import DistributionService


@pytest.mark.django_db
def test_public_post(identity, post_factory, dispatcher):
    post = post_factory(identity)
    enqueued = DistributionService(dispatcher).distribute(post)
    assert enqueued == [
        "link_crawl",
        "home_distribution",
        "realtime_notify",
        "federated_deliver",
    ]
    assert dispatcher.enqueued == [(name, post.pk) for name in enqueued]


@pytest.mark.django_db
def test_spoiler_skips_link_crawl(identity, post_factory, dispatcher):
    post = post_factory(identity, summary="spoilers", sensitive=True)
    DistributionService(dispatcher).distribute(post)
    assert "link_crawl" not in dispatcher.names
    assert "home_distribution" in dispatcher.names


@pytest.mark.django_db
def test_local_only(identity, other_identity, post_factory, dispatcher):
    """
    Local-only posts, even replies to local authors, never leave the server
    """
    parent = post_factory(other_identity)
    post = post_factory(
        identity, in_reply_to=parent, visibility=Post.Visibilities.local_only
    )
    DistributionService(dispatcher).distribute(post)
    assert dispatcher.names == ["link_crawl", "home_distribution"]


@pytest.mark.django_db
def test_reply_to_local_author(identity, other_identity, post_factory, dispatcher):
    parent = post_factory(other_identity)
    post = post_factory(identity, in_reply_to=parent)
    DistributionService(dispatcher).distribute(post)
    assert dispatcher.names[-1] == "reply_notify_origin"
    assert dispatcher.names.count("reply_notify_origin") == 1


@pytest.mark.django_db
def test_reply_to_remote_author(identity, remote_identity, post_factory, dispatcher):
    parent = post_factory(remote_identity)
    post = post_factory(identity, in_reply_to=parent)
    DistributionService(dispatcher).distribute(post)
    assert "reply_notify_origin" not in dispatcher.names


@pytest.mark.django_db
def test_failed_enqueue_does_not_block_others(
    identity, post_factory, failing_dispatcher
):
    dispatcher = failing_dispatcher("home_distribution")
    post = post_factory(identity)
    enqueued = DistributionService(dispatcher).distribute(post)
    assert enqueued == ["link_crawl", "realtime_notify", "federated_deliver"]
    assert Post.objects.filter(pk=post.pk).exists()


@pytest.mark.django_db
def test_default_dispatcher_queues_tasks(identity, post_factory, queued_tasks):
    post = post_factory(identity)
    DistributionService().distribute(post)
    assert queued_tasks() == [
        ("link_crawl", str(post.pk)),
        ("home_distribution", str(post.pk)),
        ("realtime_notify", str(post.pk)),
        ("federated_deliver", str(post.pk)),
    ]


@pytest.mark.django_db
def test_failed_enqueue_logged_once(
    identity, post_factory, failing_dispatcher, caplog
):
    dispatcher = failing_dispatcher("federated_deliver")
    post = post_factory(identity)
    with caplog.at_level(logging.DEBUG):
        DistributionService(dispatcher).distribute(post)
    messages = [r.getMessage() for r in caplog.records]
    assert len([m for m in messages if "Queue rejected" in m]) == 1
