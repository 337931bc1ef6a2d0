"""TaskSorter core library: keyword classification and task persistence.

Public API re-exports for convenient imports:
    from tasksorter import classify, TaskService, TaskStore, ...
"""

# Categories
from tasksorter.categories import (
    CategoryRule,
    CATEGORY_RULES,
    DEFAULT_CATEGORY,
    SUGGESTED_KEYWORDS,
    category_names,
    is_category,
    get_rule,
    group_by_category,
)

# Errors
from tasksorter.errors import (
    TaskSorterError,
    ValidationError,
    PersistedDataCorrupt,
)

# Models
from tasksorter.models import (
    Task,
    TaskCollection,
    sanitize_text,
    append_keyword,
)

# Classifier
from tasksorter.classifier import classify

# Persistence
from tasksorter.store import (
    STORAGE_KEY,
    BlobStore,
    MemoryBlobStore,
    FileBlobStore,
    TaskStore,
)

# Service
from tasksorter.tasks import TaskService, new_task_id

# Workspace & settings
from tasksorter.workspace import (
    Settings,
    workspace_root,
    settings_path,
    data_dir,
    load_settings,
    configure_logging,
    open_service,
)
