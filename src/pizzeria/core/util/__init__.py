from .util import ID, get_id

__all__ = ["ID", "get_id"]
