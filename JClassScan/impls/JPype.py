import typing

import jpype

from ..classPath import classPathPropertyName


def getRuntimeClassPathStr() -> typing.Optional[str]:
	"""Returns `java.class.path` of the JVM started by JPype. Never starts a JVM itself."""
	if not jpype.isJVMStarted():
		return None

	# with `convertStrings=False` we get a `java.lang.String`, so convert explicitly
	res = jpype.JClass("java.lang.System").getProperty(classPathPropertyName)
	if res is None:
		return None
	return str(res)
