from lispy.reader.grammar import parse
from lispy.reader.reader import read

__all__ = ("parse", "read")
