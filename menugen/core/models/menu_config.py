"""
Menu configuration model — one user-authored "script template menu".

Each ``.menuconfig`` file in the asset store describes one generated
menu: the submenu it appears under and the prefix given to new files.
The generator only ever reads these records.
"""

from __future__ import annotations

import posixpath

from pydantic import BaseModel, ConfigDict

DEFAULT_SUBMENU_LABEL = "My Game"
DEFAULT_NEW_FILE_PREFIX = "New"


class MenuConfig(BaseModel):
    """A loaded menu configuration.

    Attributes:
        location:        Store path of the config file itself.
        submenu_label:   Submenu the creation commands are listed under.
        new_file_prefix: Prefix for the name of each newly created file.
    """

    model_config = ConfigDict(frozen=True)

    location: str
    submenu_label: str = DEFAULT_SUBMENU_LABEL
    new_file_prefix: str = DEFAULT_NEW_FILE_PREFIX

    @property
    def folder(self) -> str:
        """Folder containing the config file."""
        return posixpath.dirname(self.location)

    @property
    def file_stem(self) -> str:
        """Config file name without its extension."""
        return posixpath.splitext(posixpath.basename(self.location))[0]

    def template_root(self, folder_name: str = "Templates") -> str:
        """The template root folder belonging to this config."""
        return template_root_for(self.location, folder_name)

    def output_path(self, extension: str) -> str:
        """Path of the module generated for this config."""
        return posixpath.join(self.folder, f"{self.file_stem}.{extension}")


def template_root_for(config_path: str, folder_name: str = "Templates") -> str:
    """``<config folder>/<folder_name>`` for a config at ``config_path``."""
    return posixpath.join(posixpath.dirname(config_path), folder_name)
