"""Tests for the async filesystem primitives."""

import os

import pytest

from statefile.core import fs

pytestmark = pytest.mark.anyio


class TestCheckAccess:
    async def test_missing_file(self, tmp_path):
        result = await fs.check_access(str(tmp_path / "nope.json"), os.R_OK)
        assert not result
        assert result.ok is False
        assert isinstance(result.error, FileNotFoundError)

    async def test_existing_file(self, tmp_path):
        target = tmp_path / "a.json"
        target.write_text("{}")
        result = await fs.check_access(str(target), os.R_OK)
        assert result
        assert result.error is None

    async def test_access_raises_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            await fs.access(str(tmp_path / "nope.json"), os.R_OK)


class TestFileOps:
    async def test_mkdirp_is_idempotent(self, tmp_path):
        target = tmp_path / "a" / "b" / "c"
        await fs.mkdirp(str(target))
        await fs.mkdirp(str(target))
        assert target.is_dir()

    async def test_write_and_read_json(self, tmp_path):
        target = str(tmp_path / "a.json")
        await fs.write_file(target, '{"a": [1, 2]}')
        assert await fs.read_json(target) == {"a": [1, 2]}

    async def test_read_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            await fs.read_file(str(tmp_path / "nope.json"))

    async def test_stat_and_unlink(self, tmp_path):
        target = tmp_path / "a.json"
        target.write_text("12345")
        assert (await fs.stat(str(target))).st_size == 5
        await fs.unlink(str(target))
        assert not target.exists()
