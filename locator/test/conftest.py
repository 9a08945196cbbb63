import pytest

from . import core

@pytest.fixture(name='test')
def contention(request):
	"""
	# Provide the &core.Test instance for the requesting test function.
	"""
	t = core.Test(request.node.name, request.function)
	with t.exits:
		yield t
