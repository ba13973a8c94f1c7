from django.db import models


class Task(models.Model):
    """
    A task that must be done by a queue processor
    """

    class TypeChoices(models.TextChoices):
        link_crawl = "link_crawl"
        home_distribution = "home_distribution"
        realtime_notify = "realtime_notify"
        federated_deliver = "federated_deliver"
        reply_notify_origin = "reply_notify_origin"

    type = models.CharField(max_length=500, choices=TypeChoices.choices)
    priority = models.IntegerField(default=0)
    subject = models.TextField()
    payload = models.JSONField(blank=True, null=True)
    error = models.TextField(blank=True, null=True)

    created = models.DateTimeField(auto_now_add=True)
    completed = models.DateTimeField(blank=True, null=True)
    failed = models.DateTimeField(blank=True, null=True)
    locked = models.DateTimeField(blank=True, null=True)
    locked_by = models.CharField(max_length=500, blank=True, null=True)

    class Meta:
        indexes = [
            models.Index(fields=["type", "subject"], name="ix_task_type_subject"),
        ]

    def __str__(self):
        return f"{self.id}/{self.type}({self.subject})"

    @classmethod
    def submit(cls, type, subject, payload=None, deduplicate=True) -> bool:
        """
        Queues a task, returning False if an identical one was already
        waiting.
        """
        # Deduplication is done against tasks that have not started yet only,
        # and only on tasks without payloads
        if deduplicate and not payload:
            if cls.objects.filter(
                type=type,
                subject=subject,
                completed__isnull=True,
                failed__isnull=True,
                locked__isnull=True,
            ).exists():
                return False
        cls.objects.create(type=type, subject=subject, payload=payload)
        return True
