import errno

from StandardTestFixture import StandardTestFixture

from libvfuse import PermissionDenied, NotFound, UnsupportedOperation
from vfuse.FuseMethod import FuseMethod


class TestFuseMethod(StandardTestFixture):

	def test_passes_results_through(this):
		@FuseMethod
		def ok(x):
			return x * 2

		this.assert_equal(ok(21), 42)
		this.assert_equal(ok.__name__, "ok")

	def test_errors_become_negative_errno(this):
		@FuseMethod
		def denied():
			raise PermissionDenied("/x")

		@FuseMethod
		def missing():
			raise NotFound("/x")

		@FuseMethod
		def unsupported():
			raise UnsupportedOperation("/x", "symlink")

		@FuseMethod
		def stale():
			raise IOError(errno.EBADF, "Operation on a closed file")

		this.assert_equal(denied(), -errno.EACCES)
		this.assert_equal(missing(), -errno.ENOENT)
		this.assert_equal(unsupported(), -errno.ENOTSUP)
		this.assert_equal(stale(), -errno.EBADF)

	def test_oserror_without_errno(this):
		@FuseMethod
		def bare():
			raise OSError("no errno")

		this.assert_equal(bare(), -errno.EACCES)

	def test_unexpected_exception_is_eio(this):
		@FuseMethod
		def broken():
			raise KeyError("boom")

		this.assert_equal(broken(), -errno.EIO)
