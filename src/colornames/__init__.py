from .errors import ColorNamesError, DatasetError, FetchError, SchemaError
from .loader import list_palettes, load_palette
from .pipeline import LanguageSummary, PullRequest, pull_names
from .records import ColorEntry, ColorRecord, LanguageGroup

__all__ = [
    "ColorEntry",
    "ColorNamesError",
    "ColorRecord",
    "DatasetError",
    "FetchError",
    "LanguageGroup",
    "LanguageSummary",
    "PullRequest",
    "SchemaError",
    "list_palettes",
    "load_palette",
    "pull_names",
]
