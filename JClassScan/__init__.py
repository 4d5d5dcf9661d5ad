__all__ = ("findAllClasses", "scanClassPath", "scanLocation", "ClassPathElementError", "ClassPathT", "getClassPathStr")

from .classPath import ClassPathT, getClassPathStr
from .scanner import ClassPathElementError, findAllClasses, scanClassPath, scanLocation
