"""Settings that control a compilation."""

from __future__ import annotations

from dataclasses import dataclass

from mcdatapack.errors import WarnSetting

DEFAULT_NAMESPACE = "dp"
DEFAULT_OUTPUT_FOLDER = "out_datapack"
DEFAULT_SCOREBOARD = "mclang"
DEFAULT_VERSION = "latest"


@dataclass
class Options:
    """Compiler settings, as given on the command line."""

    filename: str = ""
    ns: str = DEFAULT_NAMESPACE
    output_folder: str = DEFAULT_OUTPUT_FOLDER
    debug_mode: bool = False
    file_output: bool = True
    scoreboard_name: str = DEFAULT_SCOREBOARD
    mc_version: str = DEFAULT_VERSION
    description: str = ""
    warn_setting: WarnSetting = WarnSetting.MAJOR
    show_statistics: bool = False