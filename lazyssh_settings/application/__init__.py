from .sort_preference import SortPreference

__all__ = ["SortPreference"]
