from .flatten import at_index, flatten_located, in_field, map_located, path_sort_key, render_path
from .models import AtIndex, Here, InField, Located, Path, PathSegment

__all__ = [
    "AtIndex",
    "Here",
    "InField",
    "Located",
    "Path",
    "PathSegment",
    "at_index",
    "flatten_located",
    "in_field",
    "map_located",
    "path_sort_key",
    "render_path",
]
