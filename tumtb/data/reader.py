"""Lazy reading of TUM-RGBD benchmark text files.

The files are whitespace separated entries, optionally preceded by
comment lines starting with ``#``. A :obj:`FileReader` is bound to one
file and one entry type (see :mod:`tumtb.data.entry`) and produces its
entries one at a time through a read-ahead iterator:

    >>> with FileReader("rgbd_dataset_freiburg1_xyz/rgb.txt", FileEntry) as reader:
    ...     for entry in reader:
    ...         print(entry.timestamp, entry.name)

The sequence is single pass. Reading it again requires a new reader.
"""
import logging
from collections import deque

_LOGGER = logging.getLogger(__name__)


class SourceUnavailableError(OSError):
    """The file could not be opened for reading."""


class MalformedEntryError(ValueError):
    """Raised by strict readers when an entry has an invalid numeric
    token or is truncated by the end of file.

    Attributes:

        filepath (str): The file being read.

        token_index (int): Number of tokens consumed when the problem
         was found.
    """

    def __init__(self, message, filepath, token_index):
        super().__init__("{}: {} (token {})".format(filepath, message, token_index))
        self.filepath = filepath
        self.token_index = token_index


class TokenStream:
    """Splits a text stream into maximal non-whitespace tokens, reading
    a line at a time. Entries may span lines.

    Attributes:

        count (int): Tokens consumed so far.
    """

    def __init__(self, stream, first_line=""):
        self.stream = stream
        self._tokens = deque(first_line.split())
        self.count = 0

    def read_token(self):
        """Consumes the next token.

        Returns: (str): The token or `None` at the end of the stream.
        """
        while not self._tokens:
            line = self.stream.readline()
            if line == "":
                return None
            self._tokens.extend(line.split())

        self.count += 1
        return self._tokens.popleft()


class FileReader:
    """Reader of one benchmark file.

    Args:

        filepath (str or :obj:`pathlib.Path`): Input file path.

        entry_type (type): Entry class, like
         :obj:`tumtb.data.entry.FileEntry` or
         :obj:`tumtb.data.entry.TrajectoryEntry`.

        strict (bool, optional): By default, a malformed or truncated
         entry silently ends the sequence, just like the end of
         file. If `True`, a :obj:`MalformedEntryError` is raised
         instead.

    Raises:

        SourceUnavailableError: If the file can't be opened.
    """

    def __init__(self, filepath, entry_type, strict=False):
        self.filepath = str(filepath)
        self.entry_type = entry_type
        self.strict = strict
        self._finished = False

        self.stream = None
        try:
            self.stream = open(self.filepath, 'r', encoding='utf-8')
        except OSError as error:
            raise SourceUnavailableError(
                "Cannot open {} for reading: {}".format(
                    self.filepath, error)) from error

        _LOGGER.debug("Opened %s as %s entries",
                      self.filepath, entry_type.__name__)

        try:
            first_line = self._skip_comments()
        except ValueError as error:
            self._finished = True
            if strict:
                self.close()
                raise MalformedEntryError(str(error), self.filepath, 0) from error
            _LOGGER.debug("%s: %s, ending sequence", self.filepath, error)
            first_line = ""

        self.tokens = TokenStream(self.stream, first_line)

    def _skip_comments(self):
        num_comments = 0
        while True:
            line = self.stream.readline()
            if not line.startswith('#'):
                break
            num_comments += 1

        if num_comments > 0:
            _LOGGER.debug("Skipped %d comment lines of %s",
                          num_comments, self.filepath)
        return line

    def __del__(self):
        self.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __iter__(self):
        return self.begin()

    def close(self):
        """Releases the file. Any iterator still active ends at its next
        advance.
        """
        stream = getattr(self, 'stream', None)
        if stream is not None and not stream.closed:
            stream.close()
            _LOGGER.debug("Closed %s", self.filepath)

    @property
    def closed(self):
        """bool: Whether the file was released."""
        return self.stream is None or self.stream.closed

    def begin(self):
        """Creates an iterator already holding the next entry.

        Returns: (:obj:`FileReaderIterator`): Valid iterator or, if
         there's nothing left to read, one equal to :func:`end`.
        """
        if self.closed or self._finished:
            return self.end()

        return FileReaderIterator(self).advance()

    def end(self):
        """The exhausted iterator. Compare against it to test for the
        end of sequence.
        """
        return FileReaderIterator()

    def try_read_next(self):
        """Reads the next entry.

        Returns: (object): An instance of the reader's entry type, or
         `None` when the sequence has ended. Once `None` is
         returned, it's always returned.

        Raises:

            MalformedEntryError: Only in strict mode.
        """
        if self._finished or self.closed:
            return None

        start_count = self.tokens.count
        try:
            entry = self.entry_type.read(self.tokens)
        except ValueError as error:
            self._finished = True
            if self.strict:
                raise MalformedEntryError(
                    str(error), self.filepath, self.tokens.count) from error
            _LOGGER.debug("%s: %s, ending sequence", self.filepath, error)
            return None

        if entry is None:
            self._finished = True
            if self.tokens.count > start_count:
                if self.strict:
                    raise MalformedEntryError("Truncated entry", self.filepath,
                                              self.tokens.count)
                _LOGGER.debug("%s: truncated entry at the end of file",
                              self.filepath)
            else:
                _LOGGER.debug("%s: end of file", self.filepath)

        return entry


class FileReaderIterator:
    """Read-ahead iterator over a :obj:`FileReader`.

    It's either active, holding the last entry read, or exhausted. Two
    iterators are equal when both are exhausted or both are active on
    the same reader, so comparing with :func:`FileReader.end` tests
    for the end of the sequence. It also implements Python's iterator
    protocol.

    In strict mode, a malformed entry exhausts the iterator. When
    iterating with ``next``, the entry held before it is returned first
    and the :obj:`MalformedEntryError` is raised by the following call.
    """

    def __init__(self, reader=None):
        self._reader = reader
        self._entry = None
        self._pending_error = None

    def __eq__(self, other):
        if not isinstance(other, FileReaderIterator):
            return NotImplemented
        return self._reader is other._reader

    __hash__ = None

    def advance(self):
        """Reads the next entry. Becomes exhausted if there's none.
        Advancing an exhausted iterator does nothing.

        Returns: (:obj:`FileReaderIterator`): self.

        Raises:

            MalformedEntryError: Only in strict mode, after becoming
             exhausted.
        """
        if self._reader is not None:
            try:
                entry = self._reader.try_read_next()
            except MalformedEntryError:
                self._reader = None
                self._entry = None
                raise

            if entry is None:
                self._reader = None
            self._entry = entry
        return self

    @property
    def exhausted(self):
        """bool: Whether the sequence has ended."""
        return self._reader is None

    @property
    def entry(self):
        """The current entry.

        Raises:

            RuntimeError: If the iterator is exhausted.
        """
        if self._reader is None:
            raise RuntimeError("Dereferencing an exhausted iterator")
        return self._entry

    def __iter__(self):
        return self

    def __next__(self):
        if self._pending_error is not None:
            error, self._pending_error = self._pending_error, None
            raise error

        if self._reader is None:
            raise StopIteration

        entry = self._entry
        try:
            self.advance()
        except MalformedEntryError as error:
            self._pending_error = error
        return entry
