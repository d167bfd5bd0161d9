"""Entry types found in the TUM-RGBD benchmark text files.

Each entry type knows how to read itself from a
:obj:`tumtb.data.reader.TokenStream` and how to format itself back to
one text line. There's no shared base class: the reader is told which
entry class to use and calls its ``read`` classmethod.
"""
import re
from collections import namedtuple

# Same decimal forms accepted by strtod, without nan/inf.
_FLOAT_RE = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')


def parse_float(token):
    """Converts a token into a float, independent of the locale.

    Args:

        token (str): A non-whitespace token.

    Returns: (float): The value.

    Raises:

        ValueError: If the token isn't a decimal number.
    """
    if _FLOAT_RE.match(token) is None:
        raise ValueError("Invalid numeric token: {!r}".format(token))
    return float(token)


def format_timestamp(timestamp):
    """Formats timestamps with six fixed decimal digits, like the
    benchmark's files: ``1305031453.359684``.
    """
    return '{:.6f}'.format(timestamp)


def _read_floats(tokens, count):
    values = []
    for _ in range(count):
        token = tokens.read_token()
        if token is None:
            return None
        values.append(parse_float(token))
    return values


class FileEntry(namedtuple('FileEntry', ['timestamp', 'name'])):
    """One line of a file list (``rgb.txt``, ``depth.txt``).

    Attributes:

        timestamp (float): Capture time in seconds.

        name (str): File path, usually relative to the dataset
         directory.
    """

    __slots__ = ()

    @classmethod
    def read(cls, tokens):
        """Reads a timestamp token followed by a path token.

        Args:

            tokens (:obj:`tumtb.data.reader.TokenStream`): Input tokens.

        Returns: (:obj:`FileEntry`): The entry or `None` if the
         tokens ended.

        Raises:

            ValueError: If the timestamp isn't a number.
        """
        token = tokens.read_token()
        if token is None:
            return None
        timestamp = parse_float(token)

        name = tokens.read_token()
        if name is None:
            return None

        return cls(timestamp, name)

    def format(self):
        return '{} {}'.format(format_timestamp(self.timestamp), self.name)

    def __str__(self):
        return self.format()


class TrajectoryEntry(namedtuple('TrajectoryEntry',
                                 ['timestamp', 'tx', 'ty', 'tz',
                                  'qx', 'qy', 'qz', 'qw'])):
    """One pose of a trajectory file (``groundtruth.txt``).

    The quaternion is kept as read, it's not normalized.

    Attributes:

        timestamp (float): Pose time in seconds.

        tx, ty, tz (float): Translation.

        qx, qy, qz, qw (float): Orientation quaternion.
    """

    __slots__ = ()

    @classmethod
    def read(cls, tokens):
        """Reads eight numeric tokens: timestamp, translation and
        quaternion.

        Returns: (:obj:`TrajectoryEntry`): The entry or `None` if the
         tokens ended.

        Raises:

            ValueError: If any token isn't a number.
        """
        values = _read_floats(tokens, 8)
        if values is None:
            return None
        return cls(*values)

    @property
    def translation(self):
        """(float, float, float): X, Y and Z translation."""
        return (self.tx, self.ty, self.tz)

    @property
    def rotation(self):
        """(float, float, float, float): Quaternion in W, X, Y and Z
        order."""
        return (self.qw, self.qx, self.qy, self.qz)

    def format(self):
        return ' '.join([format_timestamp(self.timestamp)]
                        + [repr(float(value)) for value in self[1:]])

    def __str__(self):
        return self.format()


class AssociationEntry(namedtuple('AssociationEntry', ['first', 'second'])):
    """One line of the ``associate.py`` output, a pair of matched
    file entries, usually rgb and depth.

    Attributes:

        first (:obj:`FileEntry`): First stream's entry.

        second (:obj:`FileEntry`): Second stream's entry.
    """

    __slots__ = ()

    @classmethod
    def read(cls, tokens):
        first = FileEntry.read(tokens)
        if first is None:
            return None

        second = FileEntry.read(tokens)
        if second is None:
            return None

        return cls(first, second)

    def format(self):
        return '{} {}'.format(self.first.format(), self.second.format())

    def __str__(self):
        return self.format()
