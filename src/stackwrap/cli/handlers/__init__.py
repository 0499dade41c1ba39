from .rewrite import handle_rewrite

__all__ = [
  "handle_rewrite",
]
