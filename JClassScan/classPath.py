__all__ = ("ClassPathT", "classPathPropertyName", "normalizeClassPaths", "classPaths2String", "splitClassPath", "getClassPathStr")
import os
import sys
import typing
import warnings
from importlib import import_module
from os import pathsep as PATH_sep
from pathlib import Path

ClassPathT = typing.Iterable[typing.Union[Path, str]]

classPathPropertyName = "java.class.path"
classPathEnvVarName = "CLASSPATH"
defaultClassPathStr = "."

implPkgNameMapping = {"cpython": "JPype", "graalpython": "GraalVM"}


def normalizeClassPaths(classPaths: ClassPathT) -> typing.Iterator[str]:
	for f in classPaths:
		if isinstance(f, Path):
			f = str(f.absolute())
		yield f


def classPaths2String(classPaths: ClassPathT, sep: str = PATH_sep) -> str:
	return sep.join(normalizeClassPaths(classPaths))


def splitClassPath(classPathStr: str, sep: str = PATH_sep) -> typing.Tuple[str, ...]:
	"""Splits a classpath string into elements. Trailing empty elements are dropped, inner ones are kept and fail on scanning."""
	res = classPathStr.split(sep)
	if len(res) == 1:
		return tuple(res)

	skipped = 0
	while res and not res[-1]:
		res.pop()
		skipped += 1

	if skipped:
		warnings.warn("Classpath " + repr(classPathStr) + " ends with " + str(skipped) + " empty element(s), they are ignored")
	return tuple(res)


def _selectRuntime() -> typing.Optional[typing.Any]:
	implPkgName = implPkgNameMapping.get(sys.implementation.name)
	if implPkgName is None:
		return None
	return import_module(".impls." + implPkgName, __package__)


def getClassPathStr() -> str:
	"""Returns the classpath of this process: `java.class.path` of a JVM running in it, else `CLASSPATH` env var, else the current dir"""
	runtime = _selectRuntime()
	if runtime is not None:
		res = runtime.getRuntimeClassPathStr()
		if res is not None:
			return res

	res = os.environ.get(classPathEnvVarName)
	if res:
		return res

	return defaultClassPathStr
