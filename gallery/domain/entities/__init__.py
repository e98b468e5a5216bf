from .post import Post, PostKey

__all__ = ["Post", "PostKey"]
