import os

from StandardTestFixture import StandardTestFixture

from libvfuse import VirtualFSAdapter, OperationContext, NotFound, PermissionDenied
from vfuse.hello import HelloProvider

CTX = OperationContext(1000, 1000)


class TestHello(StandardTestFixture):

	@classmethod
	def Constructor(this):
		super().Constructor()
		this.adapter = VirtualFSAdapter(HelloProvider())

	def test_listing(this):
		this.assert_equal(this.adapter.readdir(CTX, "/"), [".", "..", "hello.txt"])

	def test_attributes(this):
		root = this.adapter.getattr(CTX, "/")
		assert root.IsDirectory()
		this.assert_equal(root.Permissions(), 0o555)

		st = this.adapter.getattr(CTX, "/hello.txt")
		assert st.IsFile()
		this.assert_equal(st.Permissions(), 0o444)
		this.assert_equal(st.st_size, len(b"Hello, World!\n"))
		this.assert_raises(NotFound, this.adapter.getattr, CTX, "/other.txt")

	def test_read(this):
		fh = this.adapter.open(CTX, "/hello.txt", os.O_RDONLY)
		this.assert_equal(this.adapter.read(CTX, "/hello.txt", 100, 0, fh), b"Hello, World!\n")
		this.adapter.release(CTX, "/hello.txt", fh)

	def test_read_only(this):
		this.assert_raises(PermissionDenied, this.adapter.open, CTX, "/hello.txt", os.O_WRONLY)
		this.assert_raises(PermissionDenied, this.adapter.unlink, CTX, "/hello.txt")
		this.assert_raises(PermissionDenied, this.adapter.mkdir, CTX, "/dir", 0o755)
