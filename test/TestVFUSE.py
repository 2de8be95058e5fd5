import pytest

eons = pytest.importorskip("eons")

from StandardTestFixture import StandardTestFixture

from vfuse.VFUSE import VFUSE, main


class TestVFUSE(StandardTestFixture):

	def test_is_an_executor(this):
		assert issubclass(VFUSE, eons.Executor)
		assert callable(main)
