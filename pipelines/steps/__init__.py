# Namespace for pipeline steps
from .resolve_columns import ResolveColumns  # noqa: F401
from .map_rows import MapRows  # noqa: F401
from .validate_records import ValidateRecords  # noqa: F401
from .persist_records import PersistRecords  # noqa: F401
