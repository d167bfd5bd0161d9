"""Unit testing utilities.
"""

import tempfile
from pathlib import Path

SAMPLE_DATASET = (Path(__file__).parent.parent.parent.parent
                  / "test-data/rgbd/rgbd_dataset_freiburg2_sample")


class TextFiles:
    """Writes text files into a temporary directory that's removed on
    `cleanup`.
    """

    def __init__(self):
        self._tmp_dir = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp_dir.name)

    def write(self, name, content):
        filepath = self.path / name
        with open(str(filepath), 'w') as stream:
            stream.write(content)
        return str(filepath)

    def cleanup(self):
        self._tmp_dir.cleanup()
