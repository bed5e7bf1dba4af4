"""Build error hierarchy: fatal errors abort the build, item errors skip one file"""

from pathlib import Path


class MicroblogError(Exception):
    """Base class for all microblog build errors."""


class FatalBuildError(MicroblogError):
    """Aborts the whole build; nothing further is written."""


class DirectoryListError(FatalBuildError):
    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"can not read directory {str(path)!r}: {cause}")


class TemplateLoadError(FatalBuildError):
    def __init__(self, name: str, cause: Exception):
        self.name = name
        self.cause = cause
        super().__init__(f"can not parse template {name!r}: {cause}")


class ItemError(MicroblogError):
    """A single file failed; the stage logs it and moves on to the next one."""

    action = "process"

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"can not {self.action} {str(path)!r}: {cause}")


class ReadError(ItemError):
    action = "read input file"


class WriteError(ItemError):
    action = "write output file"


class PromoteError(ItemError):
    action = "promote draft"


class DirectoryCreateError(FatalBuildError):
    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"can not create directory {str(path)!r}: {cause}")
