"""Readers for the TUM-RGBD benchmark text files.
"""
from .entry import FileEntry, TrajectoryEntry, AssociationEntry
from .reader import (FileReader, FileReaderIterator, TokenStream,
                     SourceUnavailableError, MalformedEntryError)
from .prefix import prefix_entry, PrefixFileIterator, make_prefix_file_iterator
from .trajectory import to_rt_camera, from_rt_camera
from .tumrgbd import (DatasetContext, find_intrinsics, DEFAULT_INTRINSICS,
                      INTRINSICS_BY_SEQUENCE)
