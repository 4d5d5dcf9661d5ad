__all__ = ("splitClassName", "extractClassesFromAJar")

import typing
from pathlib import Path

from ..scanner import scanArchive


def splitClassName(name: str) -> typing.Tuple[str, ...]:
	return tuple(name.split("."))


def extractClassesFromAJar(jarPath: typing.Union[Path, str]) -> typing.Tuple[typing.Tuple[str, ...], ...]:
	return tuple(sorted(splitClassName(n) for n in scanArchive(jarPath)))
