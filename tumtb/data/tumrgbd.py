"""TUM-RGBD dataset directories.
"""
import logging
import os

from tumtb.camera import Intrinsics

from .entry import FileEntry, TrajectoryEntry
from .prefix import make_prefix_file_iterator
from .reader import FileReader
from .trajectory import to_rt_camera

_LOGGER = logging.getLogger(__name__)

DEFAULT_DEPTH_SCALE = 1.0/5000.0

DATASET_MARKER = "rgbd_dataset_freiburg"

DEFAULT_INTRINSICS = Intrinsics(
    width=640, height=480, fx=525.0, fy=525.0, ox=319.5, oy=239.5,
    d0=0.0, d1=0.0, d2=0.0, d3=0.0, d4=0.0,
    depth_scale=DEFAULT_DEPTH_SCALE)

# Calibrations published with the benchmark, keyed by the character
# following DATASET_MARKER.
INTRINSICS_BY_SEQUENCE = {
    '1': Intrinsics(width=640, height=480, fx=517.3, fy=516.5, ox=318.6, oy=255.3,
                    d0=0.2624, d1=-0.9531, d2=-0.0054, d3=0.0026, d4=1.1633,
                    depth_scale=1.035/5000.0),
    '2': Intrinsics(width=640, height=480, fx=520.9, fy=521.0, ox=325.1, oy=249.7,
                    d0=0.2312, d1=-0.7849, d2=-0.0033, d3=-0.0001, d4=0.9172,
                    depth_scale=1.031/5000.0),
    '3': Intrinsics(width=640, height=480, fx=535.4, fy=539.2, ox=320.1, oy=247.6,
                    d0=0.0, d1=0.0, d2=0.0, d3=0.0, d4=0.0,
                    depth_scale=DEFAULT_DEPTH_SCALE)
}


def find_intrinsics(path):
    """Looks up the calibration of a dataset by its directory name,
    ``rgbd_dataset_freiburg<N>...``.

    Args:

        path (str): Any path containing the dataset directory name.

    Returns: ((:obj:`tumtb.camera.Intrinsics`, bool)): The calibration
     and whether it was found. :data:`DEFAULT_INTRINSICS` is returned
     when it's not.
    """
    path = str(path)
    marker_pos = path.find(DATASET_MARKER)
    if marker_pos < 0:
        return DEFAULT_INTRINSICS, False

    sequence = path[marker_pos + len(DATASET_MARKER):][:1]
    intrinsics = INTRINSICS_BY_SEQUENCE.get(sequence)
    if intrinsics is None:
        return DEFAULT_INTRINSICS, False

    return intrinsics, True


class DatasetContext:
    """Access to the files of one dataset directory.

    Args:

        base_path (str or :obj:`pathlib.Path`): Dataset directory.

    Attributes:

        base_path (str): Dataset directory, always ending with a path
         separator.
    """

    def __init__(self, base_path):
        base_path = str(base_path)
        if base_path == "":
            base_path = os.curdir
        if not base_path.endswith(('/', os.sep)):
            base_path += os.sep
        self.base_path = base_path

    def prefix(self, relative_path):
        """Joins the base path with `relative_path`.

        Returns: (str): Path.
        """
        return self.base_path + str(relative_path)

    def prefix_iterator(self, inner):
        """Wraps an iterator so that its file entries have the base path
        prepended.

        Args:

            inner (:obj:`tumtb.data.reader.FileReaderIterator`): Any
             entry iterator.

        Returns: (:obj:`tumtb.data.prefix.PrefixFileIterator`): Wrapped
         iterator.
        """
        return make_prefix_file_iterator(self.base_path, inner)

    def open(self, relative_path, entry_type=FileEntry, strict=False):
        """Opens a file inside the dataset directory.

        Args:

            relative_path (str): File path relative to the dataset, like
             ``rgb.txt`` or ``groundtruth.txt``.

            entry_type (type, optional): Entry class. Default is file
             entries.

            strict (bool, optional): Raise on malformed entries, see
             :obj:`tumtb.data.reader.FileReader`.

        Returns: (:obj:`tumtb.data.reader.FileReader`): The reader.

        Raises:

            :obj:`tumtb.data.reader.SourceUnavailableError`: If the file
             can't be opened.
        """
        return FileReader(self.prefix(relative_path), entry_type, strict=strict)

    def resolve_intrinsics(self):
        """Calibration of the dataset. Directories not following the
        benchmark naming get :data:`DEFAULT_INTRINSICS`.

        Returns: (:obj:`tumtb.camera.Intrinsics`): Calibration.
        """
        intrinsics, found = find_intrinsics(self.base_path)
        if not found:
            _LOGGER.debug("No known calibration for %s, using the default",
                          self.base_path)
        return intrinsics

    def read_file_list(self, relative_path):
        """Reads a whole file list.

        Returns: (List[:obj:`tumtb.data.entry.FileEntry`]): Entries
         with paths prefixed by the base path.
        """
        with self.open(relative_path, FileEntry) as reader:
            return list(self.prefix_iterator(reader.begin()))

    def read_trajectory(self, relative_path="groundtruth.txt"):
        """Reads a whole trajectory file.

        Returns: (Dict[float, :obj:`tumtb.camera.RTCamera`]): Extrinsic
         cameras by timestamp.
        """
        with self.open(relative_path, TrajectoryEntry) as reader:
            return {entry.timestamp: to_rt_camera(entry)
                    for entry in reader}

    def __str__(self):
        return self.base_path

    def __repr__(self):
        return "DatasetContext({!r})".format(self.base_path)
