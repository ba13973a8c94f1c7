import logging

from miniq.models import Task

logger = logging.getLogger(__name__)


class TaskDispatcher:
    """
    Hands work to whatever asynchronous runner executes it. Callers only get
    the guarantee that the enqueue call was made; retrying and completion
    belong to the runner.
    """

    def enqueue(self, task_name: str, subject: int | str) -> None:
        raise NotImplementedError()


class QueueDispatcher(TaskDispatcher):
    """
    Dispatches by writing rows into the miniq Task table.
    """

    def enqueue(self, task_name: str, subject: int | str) -> None:
        if task_name not in Task.TypeChoices.values:
            raise ValueError(f"Cannot enqueue unknown task type {task_name}")
        if not Task.submit(task_name, str(subject)):
            logger.debug("Task %s(%s) already queued", task_name, subject)
