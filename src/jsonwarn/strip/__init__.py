from .minimize import minimize, strip_string, strip_tree, strip_value, usage_tree

__all__ = [
    "minimize",
    "strip_string",
    "strip_tree",
    "strip_value",
    "usage_tree",
]
