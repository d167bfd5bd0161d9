"""Rewriting of file entry paths while iterating.

File lists store paths relative to the dataset directory. Wrapping an
iterator with :obj:`PrefixFileIterator` yields entries whose paths are
prefixed, without touching the original entries or reading ahead.
"""
from functools import singledispatch

from .entry import FileEntry, TrajectoryEntry


@singledispatch
def prefix_entry(entry, prefix):
    """Prepends `prefix` to the path of file entries. Other entry types
    are returned unchanged and tuples of entries are prefixed
    element-wise.

    Args:

        entry (object): Any entry.

        prefix (str): Path prefix.

    Returns: (object): Entry of the same type.
    """
    # pylint: disable=unused-argument
    return entry


@prefix_entry.register(FileEntry)
def _prefix_file_entry(entry, prefix):
    return FileEntry(entry.timestamp, prefix + entry.name)


@prefix_entry.register(TrajectoryEntry)
def _prefix_trajectory_entry(entry, prefix):
    # pylint: disable=unused-argument
    return entry


@prefix_entry.register(tuple)
def _prefix_tuple(entry, prefix):
    items = [prefix_entry(item, prefix) for item in entry]
    if hasattr(entry, '_fields'):
        return type(entry)(*items)
    return tuple(items)


class PrefixFileIterator:
    """Iterator adapter that prefixes the paths of the entries of an
    inner iterator.

    Termination is the inner iterator's: a prefix iterator equals
    another one, or a plain inner iterator, when their inner
    iterators are equal.

    Attributes:

        prefix (str): Path prefix. It's applied every time
         :attr:`entry` is accessed.

        inner (:obj:`tumtb.data.reader.FileReaderIterator`): Wrapped
         iterator.
    """

    def __init__(self, prefix, inner):
        self.prefix = prefix
        self.inner = inner

    def __eq__(self, other):
        if isinstance(other, PrefixFileIterator):
            return self.inner == other.inner
        return self.inner == other

    __hash__ = None

    def advance(self):
        """Advances the inner iterator.

        Returns: (:obj:`PrefixFileIterator`): self.
        """
        self.inner.advance()
        return self

    @property
    def exhausted(self):
        """bool: Whether the inner sequence has ended."""
        return self.inner.exhausted

    @property
    def entry(self):
        """A prefixed copy of the inner iterator's current entry."""
        return prefix_entry(self.inner.entry, self.prefix)

    def __iter__(self):
        return self

    def __next__(self):
        return prefix_entry(next(self.inner), self.prefix)


def make_prefix_file_iterator(prefix, inner):
    """Wraps `inner` into a :obj:`PrefixFileIterator`."""
    return PrefixFileIterator(prefix, inner)
