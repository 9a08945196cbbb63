"""
# Contention primitives for the project's tests. Provides &Test, &Contention, and &Absurdity.

# Tests are functions taking a single &Test parameter, conventionally named `test`.
# Under pytest, the parameter is supplied by the fixture in (module)`conftest`;
# &execute runs the tests of a module directly.
"""
import builtins
import operator
import functools
import contextlib

class Absurdity(AssertionError):
	"""
	# Exception raised by &Contention instances designating a failed assertion.
	"""

	# for re-constituting the expression
	operator_names_mapping = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__gt__': '>',
		'__le__': '<=',
		'__ge__': '>=',
		'__mod__': 'is',
	}

	def __init__(self, operator, former, latter, inverse=None):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse
		super().__init__(operator, former, latter)

	def __str__(self):
		opchars = self.operator_names_mapping.get(self.operator, self.operator)
		prefix = ('not ' if self.inverse else '')
		return prefix + ' '.join((repr(self.former), opchars, repr(self.latter)))

class Contention(object):
	"""
	# Contentions are made by the true division operator of &Test instances
	# and check the comparison applied to them:

	#!syntax/python
		def test_parse(test):
			test/ri.parse("http://host").hostname == "host"

	# All of the comparison operators are supported and are passed on to the
	# underlying objects being examined.
	"""
	__slots__ = ('test', 'object', 'storage', 'inverse')

	def __init__(self, test, object, inverse=False):
		self.test = test
		self.object = object
		self.inverse = inverse

	_override = {
		'__mod__' : ('__mod__', lambda x,y: x is y)
	}

	for k, v in operator.__dict__.items():
		if k.startswith('__get') or k.startswith('__set') or k.startswith('__del'):
			continue
		if k.startswith('__') and k.strip('_') in operator.__dict__:
			if k in _override:
				opname, v = _override[k]
			else:
				opname = k

			def check(self, ob, opname=opname, operator=v):
				x, y = self.object, ob
				if self.inverse:
					if operator(x, y): raise self.test.Absurdity(opname, x, y, inverse=True)
				else:
					if not operator(x, y): raise self.test.Absurdity(opname, x, y, inverse=False)
			locals()[k] = check
	del k, v

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		x = self.object
		y = self.storage = val
		if not isinstance(y, x): raise self.test.Absurdity("isinstance", x, y)
		return True # Inhibit the raise.

	def __xor__(self, subject):
		"""
		# Contend that the &subject raises the given exception when it is called::

		#!syntax/python
			test/Exception ^ (lambda: subject())

		# Returns the trapped exception.
		"""
		with self as exc:
			subject()
		return exc()

class Test(object):
	"""
	# An object that manages an individual test and constructs &Contention instances.

	# [ Properties ]
	# /identifier/
		# The name of the test function.
	# /subject/
		# The test function.
	# /exits/
		# A &contextlib.ExitStack for cleaning up allocations made during the test.
	"""
	__slots__ = ('subject', 'identifier', 'exits',)

	Absurdity = Absurdity
	Contention = Contention

	def __init__(self, identifier, subject, ExitStack=contextlib.ExitStack):
		self.identifier = identifier
		self.subject = subject
		self.exits = ExitStack()

	def __truediv__(self, object):
		return self.Contention(self, object)

	def __floordiv__(self, object):
		return self.Contention(self, object, True)

	def isinstance(self, *args):
		if not builtins.isinstance(*args):
			raise self.Absurdity("isinstance", *args, inverse=True)

	def seal(self):
		"""
		# Execute the subject with the Test instance as the only parameter.
		"""
		with self.exits:
			return self.subject(self)

def gather(module, prefix='test_'):
	"""
	# Collect the test functions of &module in definition order.
	"""
	return [
		(name, obj) for name, obj in module.__dict__.items()
		if name.startswith(prefix) and callable(obj)
	]

def execute(module):
	"""
	# Run the tests contained in &module. The exception of the first failure is raised.
	"""

	for id, func in gather(module):
		Test(id, func).seal()
