from guidance.models.search import Search

__all__ = ["Search"]
