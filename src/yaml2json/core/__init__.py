"""Core splitting and conversion logic."""

from .convert import Yaml2Json
from .split import DocumentIterator, SplitterState, split_documents

__all__ = ["DocumentIterator", "SplitterState", "Yaml2Json", "split_documents"]
