"""End-to-end indexing of small trees.

Builds real directory trees, runs the full provisioning + indexing pass, and
checks the listings written into every directory.
"""

from __future__ import annotations

import json
import os
import re
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from cdnindex.assets import VENDOR_DIR_NAME
from cdnindex import cli
from cdnindex.cli import run
from cdnindex.errors import DirectoryReadError
from cdnindex.listing import fs, generate_index, generator

HREF_RE = re.compile(r'<td class="name"><a href="([^"]*)">([^<]*)</a>')


def listed_names(index_html: Path) -> list[str]:
    return [name for _href, name in HREF_RE.findall(index_html.read_text(encoding="utf-8"))]


def json_names(index_json: Path) -> list[str]:
    return [entry["name"] for entry in json.loads(index_json.read_text(encoding="utf-8"))["entries"]]


class IndexTreeTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "a.txt").write_text("a", encoding="utf-8")
        (self.root / "sub").mkdir()
        (self.root / "sub" / "b.txt").write_text("b", encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_small_tree_end_to_end(self) -> None:
        indexed = run(self.root)

        self.assertEqual(indexed, 2)
        self.assertEqual(json_names(self.root / "index.json"), ["a.txt"])
        self.assertEqual(listed_names(self.root / "index.html"), ["sub", "a.txt"])
        self.assertEqual(json_names(self.root / "sub" / "index.json"), ["b.txt"])
        self.assertEqual(listed_names(self.root / "sub" / "index.html"), ["b.txt"])

        sub_page = (self.root / "sub" / "index.html").read_text(encoding="utf-8")
        self.assertIn('<span class="crumb crumb-current">sub</span>', sub_page)
        self.assertIn('href="../_vendor/style.css"', sub_page)
        self.assertIn('href="../sub/b.txt"', sub_page)

    def test_vendor_dir_is_never_indexed_or_listed(self) -> None:
        run(self.root)

        self.assertTrue((self.root / VENDOR_DIR_NAME / "style.css").is_file())
        self.assertFalse((self.root / VENDOR_DIR_NAME / "index.json").exists())
        self.assertNotIn(VENDOR_DIR_NAME, listed_names(self.root / "index.html"))

    def test_json_listing_is_sorted_newest_first(self) -> None:
        for name, stamp in (("old.txt", 1_500_000_000), ("new.txt", 1_700_000_000), ("mid.txt", 1_600_000_000)):
            (self.root / name).write_text(name, encoding="utf-8")
            os.utime(self.root / name, (stamp, stamp))
        os.utime(self.root / "a.txt", (1_400_000_000, 1_400_000_000))

        generate_index(self.root)

        entries = json.loads((self.root / "index.json").read_text(encoding="utf-8"))["entries"]
        self.assertEqual([entry["name"] for entry in entries], ["new.txt", "mid.txt", "old.txt", "a.txt"])
        dates = [entry["date"] for entry in entries]
        self.assertEqual(dates, sorted(dates, reverse=True))
        self.assertEqual(set(entries[0]), {"name", "date", "size"})

    def test_rerun_regenerates_without_listing_old_outputs(self) -> None:
        run(self.root)
        first = json.loads((self.root / "index.json").read_text(encoding="utf-8"))

        run(self.root)
        second = json.loads((self.root / "index.json").read_text(encoding="utf-8"))

        self.assertEqual(first, second)
        self.assertEqual(listed_names(self.root / "index.html"), ["sub", "a.txt"])
        self.assertEqual(json_names(self.root / "sub" / "index.json"), ["b.txt"])

    def test_deep_tree_is_indexed_children_before_parents(self) -> None:
        current = self.root
        for depth in range(40):
            current = current / f"d{depth}"
        current.mkdir(parents=True)

        written: list[Path] = []

        real_write = generator.write_index_json

        def record(listing):
            written.append(listing.directory)
            return real_write(listing)

        with mock.patch.object(generator, "write_index_json", side_effect=record):
            indexed = generate_index(self.root)

        self.assertEqual(indexed, 42)
        self.assertEqual(written[-1], self.root)
        self.assertLess(written.index(current), written.index(current.parent))
        self.assertLess(written.index(self.root / "sub"), written.index(self.root))
        self.assertTrue((current / "index.html").is_file())

    def test_unreadable_subdirectory_aborts_run(self) -> None:

        real_scandir = os.scandir
        blocked = self.root / "sub"

        def scandir(path):
            if Path(path) == blocked:
                raise PermissionError("denied")
            return real_scandir(path)

        with mock.patch.object(fs.os, "scandir", side_effect=scandir):
            with self.assertRaises(DirectoryReadError):
                generate_index(self.root)

        self.assertFalse((self.root / "index.json").exists())

    @unittest.skipUnless(sys.platform.startswith("linux"), "needs a filesystem that accepts non-UTF-8 names")
    def test_undecodable_names_are_listed_lossily(self) -> None:
        raw_root = os.fsencode(self.root)
        with open(os.path.join(raw_root, b"bad\xffname.txt"), "wb") as handle:
            handle.write(b"x")
        os.mkdir(os.path.join(raw_root, b"dir\xff"))

        run(self.root)

        self.assertIn("bad\ufffdname.txt", json_names(self.root / "index.json"))
        self.assertIn("bad\ufffdname.txt", listed_names(self.root / "index.html"))
        self.assertIn("dir\ufffd", listed_names(self.root / "index.html"))
        nested_page = Path(os.fsdecode(os.path.join(raw_root, b"dir\xff", b"index.html")))
        self.assertIn('<span class="crumb crumb-current">dir\ufffd</span>', nested_page.read_text(encoding="utf-8"))

    def test_symlinked_directory_is_linked_as_directory_without_descending(self) -> None:
        (self.root / "alias").symlink_to(self.root / "sub", target_is_directory=True)

        indexed = run(self.root)

        self.assertEqual(indexed, 2)
        page = (self.root / "index.html").read_text(encoding="utf-8")
        self.assertIn('<a href="alias/">alias</a>', page)
        self.assertIn('src="_vendor/icons/dir.svg"', page)
        entries = json.loads((self.root / "index.json").read_text(encoding="utf-8"))["entries"]
        self.assertIn({"name": "alias", "size": "directory"}, [{k: e[k] for k in ("name", "size")} for e in entries])


class CliRunTests(unittest.TestCase):
    def test_listing_write_failure_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("a", encoding="utf-8")
            (root / "sub" / "index.json").mkdir(parents=True)

            with (
                mock.patch.object(sys, "argv", ["cdnindex", str(root), "--quiet"]),
                mock.patch("cdnindex.config.CONFIG_PATH", root / "missing.json"),
            ):
                with self.assertRaises(SystemExit) as caught:
                    cli.main()

            message = str(caught.exception.code)
            self.assertTrue(message.startswith("cdnindex: Cannot write "), message)
            self.assertIn(str(root / "sub" / "index.json"), message)
            self.assertTrue((root / "_vendor" / "style.css").is_file())
            self.assertFalse((root / "index.json").exists())

    def test_successful_run_returns_normally(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("a", encoding="utf-8")

            with (
                mock.patch.object(sys, "argv", ["cdnindex", str(root), "--quiet"]),
                mock.patch("cdnindex.config.CONFIG_PATH", root / "missing.json"),
            ):
                cli.main()

            self.assertEqual(json_names(root / "index.json"), ["a.txt"])


if __name__ == "__main__":
    unittest.main()
