from npqgen.walk.path import Path
from npqgen.walk.path_walker import PathWalker

__all__ = ["Path", "PathWalker"]
