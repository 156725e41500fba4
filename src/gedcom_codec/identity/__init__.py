from .uuid_factory import IdFactory, new_id, sequential_ids

__all__ = ["IdFactory", "new_id", "sequential_ids"]
