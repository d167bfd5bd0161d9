"""Tests path prefixing of entry iterators.
"""

# pylint: disable=missing-docstring, no-self-use

import unittest

from tumtb.data.entry import FileEntry, TrajectoryEntry, AssociationEntry
from tumtb.data.reader import FileReader, MalformedEntryError
from tumtb.data.prefix import (prefix_entry, PrefixFileIterator,
                               make_prefix_file_iterator)

from ._utils import TextFiles, SAMPLE_DATASET


class TestPrefixEntry(unittest.TestCase):
    def test_file_entry(self):
        entry = FileEntry(1.5, "rgb/1.png")
        self.assertEqual(FileEntry(1.5, "P/rgb/1.png"), prefix_entry(entry, "P/"))
        self.assertEqual("rgb/1.png", entry.name)

    def test_trajectory_entry(self):
        entry = TrajectoryEntry(1, 2, 3, 4, 5, 6, 7, 8)
        self.assertEqual(entry, prefix_entry(entry, "P/"))

    def test_tuples(self):
        entry = AssociationEntry(FileEntry(1.0, "rgb/1.png"),
                                 FileEntry(1.1, "depth/1.png"))
        prefixed = prefix_entry(entry, "P/")

        self.assertIsInstance(prefixed, AssociationEntry)
        self.assertEqual("P/rgb/1.png", prefixed.first.name)
        self.assertEqual("P/depth/1.png", prefixed.second.name)

        self.assertEqual((FileEntry(1.0, "P/a.png"), 5, "b.png"),
                         prefix_entry((FileEntry(1.0, "a.png"), 5, "b.png"), "P/"))


class TestPrefixFileIterator(unittest.TestCase):
    def setUp(self):
        self.files = TextFiles()

    def tearDown(self):
        self.files.cleanup()

    def test_file_entries(self):
        with FileReader(SAMPLE_DATASET / "rgb.txt", FileEntry) as reader:
            plain = list(reader)

        with FileReader(SAMPLE_DATASET / "rgb.txt", FileEntry) as reader:
            iterator = make_prefix_file_iterator("P/", reader.begin())
            prefixed = []
            while iterator != reader.end():
                prefixed.append(iterator.entry)
                iterator.advance()

        self.assertEqual(len(plain), len(prefixed))
        for orig, pref in zip(plain, prefixed):
            self.assertEqual(orig.timestamp, pref.timestamp)
            self.assertEqual("P/" + orig.name, pref.name)

    def test_same_termination(self):
        filepath = self.files.write("rgb.txt", "1.0 a.png\n2.0 b.png\n3.0\n")
        with FileReader(filepath, FileEntry) as reader:
            self.assertEqual(2, len(list(PrefixFileIterator("P/", reader.begin()))))

    def test_strict_error_after_valid_entries(self):
        filepath = self.files.write("rgb.txt", "1.0 a.png\n2.0 b.png\nabc c.png\n")
        with FileReader(filepath, FileEntry, strict=True) as reader:
            iterator = PrefixFileIterator("P/", reader.begin())
            entries = []
            with self.assertRaises(MalformedEntryError):
                for entry in iterator:
                    entries.append(entry)

            self.assertEqual([FileEntry(1.0, "P/a.png"), FileEntry(2.0, "P/b.png")],
                             entries)
            self.assertEqual(reader.end(), iterator)
            self.assertEqual([], list(iterator))

    def test_trajectory_unchanged(self):
        with FileReader(SAMPLE_DATASET / "groundtruth.txt", TrajectoryEntry) as reader:
            plain = list(reader)

        with FileReader(SAMPLE_DATASET / "groundtruth.txt", TrajectoryEntry) as reader:
            prefixed = list(PrefixFileIterator("anything/", reader.begin()))

        self.assertEqual(3, len(plain))
        self.assertEqual(plain, prefixed)

    def test_equality(self):
        with FileReader(SAMPLE_DATASET / "rgb.txt", FileEntry) as reader:
            inner = reader.begin()
            iterator = PrefixFileIterator("P/", inner)

            self.assertEqual(inner, iterator)
            self.assertEqual(iterator, inner)
            self.assertNotEqual(reader.end(), iterator)
            self.assertNotEqual(PrefixFileIterator("P/", reader.end()), iterator)

            for _ in range(4):
                iterator.advance()
            self.assertTrue(inner.exhausted)
            self.assertEqual(reader.end(), iterator)
            self.assertEqual(PrefixFileIterator("Q/", reader.end()), iterator)

    def test_recomputed_per_access(self):
        with FileReader(SAMPLE_DATASET / "rgb.txt", FileEntry) as reader:
            iterator = PrefixFileIterator("P/", reader.begin())
            self.assertEqual("P/rgb/1311867170.462290.png", iterator.entry.name)

            iterator.prefix = "Q/"
            self.assertEqual("Q/rgb/1311867170.462290.png", iterator.entry.name)
            self.assertEqual("rgb/1311867170.462290.png", iterator.inner.entry.name)

    def test_associations(self):
        with FileReader(SAMPLE_DATASET / "associations.txt",
                        AssociationEntry) as reader:
            entries = list(make_prefix_file_iterator("base/", reader.begin()))

        self.assertEqual(3, len(entries))
        self.assertEqual("base/rgb/1311867170.494173.png", entries[1].first.name)
        self.assertEqual("base/depth/1311867170.482005.png", entries[1].second.name)


if __name__ == '__main__':
    unittest.main()
