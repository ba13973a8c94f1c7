import logging

from django.db import transaction

from activities.models import Post
from core.exceptions import capture_exception
from miniq.dispatch import QueueDispatcher, TaskDispatcher
from miniq.models import Task

logger = logging.getLogger(__name__)


class DistributionService:
    """
    Queues the fan-out work for a Post that has already been committed.

    Every enqueue is independent: one failing is logged and reported, and the
    rest still go out. Nothing here can undo the Post itself.
    """

    def __init__(self, dispatcher: TaskDispatcher | None = None):
        self.dispatcher = dispatcher or QueueDispatcher()

    def planned_tasks(self, post: Post) -> list[tuple[str, int]]:
        """
        Returns (task type, subject ID) pairs this Post needs
        """
        tasks = []
        # We don't prefetch links hidden behind a content warning
        if not post.summary:
            tasks.append((Task.TypeChoices.link_crawl, post.pk))
        tasks.append((Task.TypeChoices.home_distribution, post.pk))
        if not post.is_local_only:
            # Posts are their own stream entries
            tasks.append((Task.TypeChoices.realtime_notify, post.pk))
            tasks.append((Task.TypeChoices.federated_deliver, post.pk))
            if post.is_reply and post.in_reply_to.author.local:
                tasks.append((Task.TypeChoices.reply_notify_origin, post.pk))
        return tasks

    def distribute(self, post: Post) -> list[str]:
        """
        Enqueues all the Post's tasks, returning the ones that made it
        """
        enqueued = []
        for task_name, subject in self.planned_tasks(post):
            try:
                with transaction.atomic():
                    self.dispatcher.enqueue(task_name, subject)
            except Exception as e:
                logger.warning(
                    "Could not enqueue %s for post %s: %s", task_name, post.pk, e
                )
                capture_exception(e)
                continue
            enqueued.append(str(task_name))
        return enqueued
