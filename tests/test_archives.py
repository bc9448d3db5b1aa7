import os
import shutil
import sys
import tempfile
import unittest
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

# Add parent directory to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from helpers import make_zip, make_zip_with_bad_name
from release_finder.config import NoArchivesFound, OpenError, ScanConfig, TraversalError
from release_finder.core import LatestReleasePipeline, inspect_archive, locate_archives
from release_finder.utils.events import SimpleEmitter

T1 = 1_600_000_000
T2 = 1_700_000_000


class TestLocateArchives(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.root = Path(self.test_dir)

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_finds_archives_recursively(self):
        make_zip(self.root / "a.zip", {"x.txt": b"x"})
        make_zip(self.root / "sub" / "deeper" / "b.ZIP", {"y.txt": b"y"})
        (self.root / "notes.txt").write_text("not an archive")
        (self.root / "sub" / "c.zip.bak").write_text("nope")
        (self.root / "folder.zip").mkdir()

        archives = locate_archives(self.root)

        self.assertEqual(archives, [
            self.root / "a.zip",
            self.root / "sub" / "deeper" / "b.ZIP",
        ])

    def test_empty_directory(self):
        self.assertEqual(locate_archives(self.root), [])

    def test_missing_root(self):
        with self.assertRaises(TraversalError):
            locate_archives(self.root / "missing")

    def test_unreadable_subdirectory_aborts_walk(self):
        make_zip(self.root / "a.zip", {"x.txt": b"x"})
        locked = self.root / "sub" / "locked"
        make_zip(locked / "b.zip", {"y.txt": b"y"})
        real_scandir = os.scandir

        def fake_scandir(path="."):
            if os.fspath(path) == str(locked):
                raise PermissionError(13, "Permission denied", str(locked))
            return real_scandir(path)

        archives = None
        with patch("os.scandir", side_effect=fake_scandir):
            with self.assertRaises(TraversalError) as ctx:
                archives = locate_archives(self.root)

        self.assertIsNone(archives)
        self.assertIn("locked", str(ctx.exception))

    def test_root_is_a_file(self):
        path = make_zip(self.root / "a.zip", {"x.txt": b"x"})
        with self.assertRaises(TraversalError):
            locate_archives(path)


class TestInspectArchive(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.root = Path(self.test_dir)

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_skips_directory_entries(self):
        path = make_zip(self.root / "pkg.zip", {
            "bin/": b"",
            "bin/tool.exe": b"12345",
            "docs/": b"",
            "readme.txt": b"hello",
        }, mtime=T1)

        records = inspect_archive(path)

        self.assertEqual([r.name for r in records], ["bin/tool.exe", "readme.txt"])
        self.assertEqual([r.size for r in records], [5, 5])

    def test_records_use_archive_mtime(self):
        path = make_zip(self.root / "pkg.zip", {
            "a.txt": b"a",
            "b/c.txt": b"cc",
        }, mtime=T2)

        records = inspect_archive(path)

        expected = datetime.fromtimestamp(T2)
        self.assertTrue(records)
        for record in records:
            self.assertEqual(record.mod_time, expected)
            self.assertEqual(record.archive_path, path)
            self.assertEqual(record.archive_name, "pkg.zip")

    def test_empty_archive(self):
        path = make_zip(self.root / "empty.zip", {})
        self.assertEqual(inspect_archive(path), [])

    def test_corrupt_archive(self):
        path = self.root / "broken.zip"
        path.write_bytes(b"this is not a zip file at all")

        with self.assertRaises(OpenError) as ctx:
            inspect_archive(path)
        self.assertEqual(ctx.exception.archive_path, path)

    def test_undecodable_entry_name(self):
        path = make_zip_with_bad_name(self.root / "bad.zip")

        with self.assertRaises(OpenError) as ctx:
            inspect_archive(path)
        self.assertEqual(ctx.exception.archive_path, path)

    def test_missing_archive(self):
        with self.assertRaises(OpenError):
            inspect_archive(self.root / "gone.zip")


class TestPipeline(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.root = Path(self.test_dir)
        self.input_dir = self.root / "archives"
        self.input_dir.mkdir()
        self.output = self.root / "out" / "latest_releases.txt"

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def run_pipeline(self, emitter=None):
        config = ScanConfig(input_dir=self.input_dir, output_file=self.output)
        return LatestReleasePipeline(config, emitter).run()

    def test_two_archives_end_to_end(self):
        make_zip(self.input_dir / "a.zip", {"lib.dll": b"x" * 100}, mtime=T1)
        make_zip(self.input_dir / "b.zip", {
            "lib.dll": b"y" * 200,
            "readme.txt": b"z" * 10,
        }, mtime=T2)

        result = self.run_pipeline()

        self.assertEqual(result.archives_found, 2)
        self.assertEqual(result.archives_processed, 2)
        self.assertEqual(result.unique_files, 2)

        lines = self.output.read_text(encoding='utf-8').splitlines()
        self.assertEqual(len(lines), 4)
        stamp = datetime.fromtimestamp(T2).strftime("%Y-%m-%d %H:%M:%S")
        self.assertEqual(lines[2], f"{'lib.dll':<50} {stamp:<20} {'200':<10} b.zip")
        self.assertEqual(lines[3], f"{'readme.txt':<50} {stamp:<20} {'10':<10} b.zip")

    def test_corrupt_archive_is_skipped(self):
        make_zip(self.input_dir / "good.zip", {"app.exe": b"abc"}, mtime=T1)
        (self.input_dir / "bad.zip").write_bytes(b"garbage")
        skipped = []
        emitter = SimpleEmitter().on('archive:skipped', lambda **kw: skipped.append(kw['path']))

        with self.assertLogs('release_finder.core.pipeline', level='WARNING'):
            result = self.run_pipeline(emitter)

        self.assertEqual(skipped, [self.input_dir / "bad.zip"])
        self.assertEqual(result.archives_found, 2)
        self.assertEqual(result.archives_processed, 1)
        self.assertEqual(len(result.inspection.skipped), 1)
        self.assertIn("app.exe", self.output.read_text(encoding='utf-8'))

    def test_archive_with_undecodable_name_is_skipped(self):
        make_zip(self.input_dir / "good.zip", {"lib.dll": b"x" * 100}, mtime=T1)
        make_zip_with_bad_name(self.input_dir / "bad.zip", mtime=T2)

        with self.assertLogs('release_finder.core.pipeline', level='WARNING'):
            result = self.run_pipeline()

        self.assertEqual(result.archives_processed, 1)
        self.assertEqual([s.path for s in result.inspection.skipped], [self.input_dir / "bad.zip"])
        stamp = datetime.fromtimestamp(T1).strftime("%Y-%m-%d %H:%M:%S")
        lines = self.output.read_text(encoding='utf-8').splitlines()
        self.assertEqual(lines[2:], [f"{'lib.dll':<50} {stamp:<20} {'100':<10} good.zip"])

    def test_archive_without_files_does_not_count_as_processed(self):
        make_zip(self.input_dir / "dirs.zip", {"only/": b""}, mtime=T1)
        make_zip(self.input_dir / "real.zip", {"f.txt": b"f"}, mtime=T1)

        result = self.run_pipeline()

        self.assertEqual(result.archives_found, 2)
        self.assertEqual(result.archives_processed, 1)

    def test_no_archives_leaves_output_untouched(self):
        (self.input_dir / "notes.txt").write_text("nothing here")
        self.output.parent.mkdir()
        self.output.write_text("previous report")

        with self.assertRaises(NoArchivesFound):
            self.run_pipeline()

        self.assertEqual(self.output.read_text(), "previous report")

    def test_no_archives_creates_no_output(self):
        with self.assertRaises(NoArchivesFound):
            self.run_pipeline()
        self.assertFalse(self.output.exists())

    def test_missing_input_dir(self):
        shutil.rmtree(self.input_dir)
        with self.assertRaises(TraversalError):
            self.run_pipeline()

    def test_stage_events(self):
        make_zip(self.input_dir / "a.zip", {"x.txt": b"x"}, mtime=T1)
        stages = []
        emitter = SimpleEmitter().on('stage:complete', lambda stage, **_: stages.append(stage))

        self.run_pipeline(emitter)

        self.assertEqual(stages, ['locate', 'inspect', 'resolve', 'report'])


if __name__ == '__main__':
    unittest.main()
