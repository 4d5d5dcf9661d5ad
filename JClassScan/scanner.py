__all__ = ("ClassPathElementError", "classNameFromPath", "scanDirectory", "scanArchive", "scanLocation", "scanClassPath", "findAllClasses")
import os
import re
import typing
import zipfile
from pathlib import Path

from .classPath import PATH_sep, ClassPathT, normalizeClassPaths, splitClassPath, getClassPathStr

classExtRx = re.compile(re.escape(".class"), re.IGNORECASE)
archiveSep = "/"


class ClassPathElementError(RuntimeError):
	"""A classpath element cannot be scanned. Scanning is aborted, partial results are not returned."""

	__slots__ = ()

	@property
	def location(self) -> str:
		return self.args[1]


def classNameFromPath(relPath: str, sep: str) -> typing.Optional[str]:
	"""Converts a path relative to a classpath element into a class name. Returns `None` for paths having no `.class` (case-insensitive) past the first char"""
	m = classExtRx.search(relPath)
	if m is None or m.start() <= 0:
		return None
	return relPath[: m.start()].replace(sep, ".")


def scanDirectory(root: typing.Union[Path, str]) -> typing.List[str]:
	"""Walks `root` depth-first, pre-order. Unlistable dirs raise instead of being skipped, as opposed to `os.walk`."""
	root = Path(root)
	res = []
	stack = [()]
	while stack:
		relParts = stack.pop()
		with os.scandir(root.joinpath(*relParts)) as it:
			entries = sorted(it, key=lambda e: e.name)

		subDirs = []
		for e in entries:
			parts = relParts + (e.name,)
			if e.is_dir():
				subDirs.append(parts)
				continue
			name = classNameFromPath(os.sep.join(parts), os.sep)
			if name is not None:
				res.append(name)
		# reversed, so the first subdir is popped first
		stack.extend(reversed(subDirs))
	return res


def scanArchive(path: typing.Union[Path, str]) -> typing.List[str]:
	res = []
	with zipfile.ZipFile(path) as z:
		for f in z.infolist():
			name = classNameFromPath(f.filename, archiveSep)
			if name is not None:
				res.append(name)
	return res


def scanLocation(location: typing.Union[Path, str]) -> typing.List[str]:
	"""Lists classes in a single classpath element: a dir or a jar (anything not a dir is treated as a zip archive)"""
	try:
		if os.path.isdir(location):
			return scanDirectory(location)
		return scanArchive(location)
	except (OSError, zipfile.BadZipFile) as ex:
		raise ClassPathElementError("Cannot scan a classpath element", str(location)) from ex


def scanClassPath(classPath: ClassPathT) -> typing.List[str]:
	"""Concatenates classes of every element of `classPath` in its order. No deduplication."""
	res = []
	for location in normalizeClassPaths(classPath):
		res.extend(scanLocation(location))
	return res


def findAllClasses(classPathStr: typing.Optional[str] = None, sep: str = PATH_sep) -> typing.List[str]:
	"""Lists all classes available on the classpath of this process (or on `classPathStr`)"""
	if classPathStr is None:
		classPathStr = getClassPathStr()
	return scanClassPath(splitClassPath(classPathStr, sep))
