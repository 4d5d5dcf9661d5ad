import typing

import java  # pylint: disable=import-error

from ..classPath import classPathPropertyName


def getRuntimeClassPathStr() -> typing.Optional[str]:
	res = java.type("java.lang.System").getProperty(classPathPropertyName)
	if res is None:
		return None
	return str(res)
