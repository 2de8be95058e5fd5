from StandardTestFixture import StandardTestFixture
from MemoryProvider import MemoryProvider

from libvfuse import Fallback, PermissionDenied


class TestFallbackTruncate(StandardTestFixture):

	def Setup(this):
		this.fs = MemoryProvider(files={"/f": b"abcdef"})

	def test_truncate_to_zero(this):
		Fallback.truncate(this.fs, "/f", 0)
		this.assert_equal(this.fs.files["/f"], b"")

	def test_truncate_negative_is_zero(this):
		Fallback.truncate(this.fs, "/f", -5)
		this.assert_equal(this.fs.files["/f"], b"")

	def test_truncate_to_prefix(this):
		Fallback.truncate(this.fs, "/f", 2)
		this.assert_equal(this.fs.files["/f"], b"ab")

	def test_truncate_does_not_extend(this):
		Fallback.truncate(this.fs, "/f", 100)
		this.assert_equal(this.fs.files["/f"], b"abcdef")
		this.assert_equal(this.fs.CallCount('write_to'), 0)


class TestFallbackRename(StandardTestFixture):

	def test_copy_then_delete(this):
		fs = MemoryProvider(files={"/src": b"data"})
		Fallback.rename(fs, "/src", "/dst")
		this.assert_equal(fs.files, {"/dst": b"data"})
		this.assert_equal([c[0] for c in fs.calls], ['write_to', 'delete'])

	def test_directories_are_refused(this):
		fs = MemoryProvider(dirs={"/d"})
		this.assert_raises(PermissionDenied, Fallback.rename, fs, "/d", "/e")
		this.assert_equal(fs.calls, [])

	def test_needs_write_permission_on_destination(this):
		fs = MemoryProvider(files={"/src": b"data"})
		fs.readonly.add("/dst")
		this.assert_raises(PermissionDenied, Fallback.rename, fs, "/src", "/dst")
		this.assert_equal(fs.files, {"/src": b"data"})

	def test_needs_delete_permission_on_source(this):
		fs = MemoryProvider(files={"/src": b"data"}, deletable=False)
		this.assert_raises(PermissionDenied, Fallback.rename, fs, "/src", "/dst")
		this.assert_equal(fs.files, {"/src": b"data"})
