"""CSS output sinks

A sink is anywhere generated CSS text ends up: a style element in the host
page, a file picked up by a browser extension, or memory in tests. Each
write replaces the previous content wholesale.
"""
from ..common_imports import *
from ..models.entity import MARKER_CLASS_PREFIX


class CSSSink:
    """Text-bearing CSS target"""

    def write(self, text: str):
        raise NotImplementedError

    def clear(self):
        self.write("")

    @property
    def text(self) -> str:
        raise NotImplementedError


class MemorySink(CSSSink):
    """Keeps the CSS in memory and counts writes"""

    def __init__(self, name: str = "memory"):
        self.name = name
        self._text = ""
        self.write_count = 0

    def write(self, text: str):
        self._text = text
        self.write_count += 1

    @property
    def text(self) -> str:
        return self._text

    def __repr__(self):
        return f"MemorySink({self.name!r}, {len(self._text)} chars)"


class FileSink(CSSSink):
    """Writes CSS to a file, replacing it atomically"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def write(self, text: str):
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(text, encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            print(f"❌ Error writing stylesheet {self.path}: {e}")

    @property
    def text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""


class BodyClassList:
    """Class list of the page body, used for global CSS marker classes"""

    def __init__(self, classes: Optional[Iterable[str]] = None):
        self._classes: List[str] = list(classes or [])

    def add(self, class_name: str):
        if class_name not in self._classes:
            self._classes.append(class_name)

    def remove(self, class_name: str):
        if class_name in self._classes:
            self._classes.remove(class_name)

    def remove_prefixed(self, prefix: str = MARKER_CLASS_PREFIX) -> List[str]:
        removed = [c for c in self._classes if c.startswith(prefix)]
        self._classes = [c for c in self._classes if not c.startswith(prefix)]
        return removed

    def __contains__(self, class_name: str) -> bool:
        return class_name in self._classes

    @property
    def classes(self) -> List[str]:
        return list(self._classes)

    @property
    def class_name(self) -> str:
        return " ".join(self._classes)
