"""Error kinds raised by the TaskSorter core."""


class TaskSorterError(Exception):
    """Base class for TaskSorter errors."""


class ValidationError(TaskSorterError):
    """Input rejected before any mutation: empty task text or unknown category."""


class PersistedDataCorrupt(TaskSorterError):
    """Stored task data does not have the expected shape.

    Raised while parsing inside TaskStore.load and recovered there; callers
    of the store never see it.
    """
