"""a fluent builder for draft-07 json schema documents"""
__version__ = "0.1.0"
from . import exceptions, keywords, paths
from .builder import *
from .exceptions import *
from .registry import RefRegistry
from .types import *
