"""Access to the program's INI configuration by ``Section.Key`` names."""

from __future__ import annotations

import os
from typing import ClassVar, Optional

from mjbase.inifile import IniFile
from mjbase.initext import KeyValue
from mjbase.tools import get_current_path, is_file_exist

DEFAULT_CONFIG_NAME = "config.ini"


class Ini:
    """A loaded configuration file read through dotted ``Section.Key`` names."""

    _instance: ClassVar[Optional["Ini"]] = None

    def __init__(
        self,
        file_name: str = DEFAULT_CONFIG_NAME,
        base_dir: Optional[str | os.PathLike] = None,
    ) -> None:
        directory = get_current_path() if base_dir is None else os.fspath(base_dir)
        self.path = os.path.join(directory, file_name)
        if not is_file_exist(self.path):
            raise FileNotFoundError(
                f"cannot find config file {self.path}; "
                "make sure the config file is in the correct path"
            )
        self._file = IniFile()
        if not self._file.load(self.path):
            raise OSError(f"failed to load config file {self.path}")

    @classmethod
    def instance(cls) -> "Ini":
        """Return the shared configuration, loading config.ini from the working directory once."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _entry(self, name: str) -> KeyValue:
        section, separator, key = name.partition(".")
        if not separator:
            raise ValueError(f"config name must look like Section.Key: {name!r}")
        return self._file[section][key]

    def get_int(self, name: str) -> int:
        """Read an integer; a missing or unreadable value gives 0."""
        return self._entry(name).as_int()

    def get_string(self, name: str) -> str:
        """Read a value as text; a missing value gives ''."""
        return self._entry(name).value

    def get_float(self, name: str) -> float:
        """Read a float; a missing or unreadable value gives 0.0."""
        return self._entry(name).as_float()