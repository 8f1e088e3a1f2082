"""Writing the generated commands out as a datapack folder."""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from pathlib import Path

from mcdatapack.bcconvert import BCConverter, CmdFunc, format_commands
from mcdatapack.bcgen import BCManager
from mcdatapack.errors import CompileError
from mcdatapack.options import Options

PACK_VERSIONS = {
    "latest": 10,
    "1.19": 10,
    "1.18.2": 9,
    "1.18.1": 8,
    "1.18": 8,
    "1.17.1": 7,
    "1.17": 7,
}

DEFAULT_DESCRIPTION = "Generated with mcdatapack"
TAGGED_FUNCTIONS = ("tick", "load")
COMMANDS_DEBUG_FILE = "mcl_cmds.debug"


def pack_format(version: str) -> int:
    """Return the pack format of a Minecraft version."""
    try:
        return PACK_VERSIONS[version]
    except KeyError:
        raise CompileError(f"Unsupported version given: '{version}'.") from None


class DatapackWriter:
    """Creates the datapack folder and fills it with function files."""

    def __init__(self, options: Options) -> None:
        self.root = Path(options.output_folder)
        self.ns = options.ns
        self.version = options.mc_version
        self.description = options.description

    def prepare(self) -> None:
        """Remove a previous datapack in the output folder and recreate it.

        A folder that exists but is neither empty nor a datapack is left
        alone and raises CompileError.
        """
        if self.root.is_dir():
            is_pack = (self.root / "pack.mcmeta").is_file()
            if not is_pack and any(self.root.iterdir()):
                raise CompileError("Output folder exists, but is not a datapack.")
            try:
                shutil.rmtree(self.root)
            except OSError:
                raise CompileError(
                    "Something went wrong while deleting old directory."
                ) from None
        self._mkdir(self.root)

    def write(self, funcs: Iterable[CmdFunc]) -> None:
        """Write the folder structure, pack file and one file per function."""
        fmt = pack_format(self.version)
        for folder in self._folders():
            self._mkdir(folder)
        description = self.description or DEFAULT_DESCRIPTION
        self._write_file(
            self.root / "pack.mcmeta",
            f'{{"pack":{{"pack_format":{fmt},"description":"{description}"}}}}',
            "pack.mcmeta",
        )
        for func in funcs:
            self._write_function(func)

    @property
    def _functions_dir(self) -> Path:
        return self.root / "data" / self.ns / "functions"

    @property
    def _tags_dir(self) -> Path:
        return self.root / "data" / "minecraft" / "tags" / "functions"

    def _folders(self) -> list[Path]:
        data = self.root / "data"
        return [
            data,
            data / self.ns,
            self._functions_dir,
            data / "minecraft",
            data / "minecraft" / "tags",
            self._tags_dir,
        ]

    @staticmethod
    def _mkdir(path: Path) -> None:
        try:
            path.mkdir()
        except OSError:
            raise CompileError(f"Could not create folder '{path}'") from None

    @staticmethod
    def _write_file(path: Path, content: str, label: str) -> None:
        try:
            with path.open("w", encoding="utf-8", newline="\n") as fh:
                fh.write(content)
        except OSError:
            raise CompileError(f"Could not write to file '{label}'.") from None

    def _write_function(self, func: CmdFunc) -> None:
        filename = func.name + ".mcfunction"
        content = "".join(cmd + "\n" for cmd in func.cmd_list)
        self._write_file(self._functions_dir / filename, content, filename)
        if func.name in TAGGED_FUNCTIONS:
            self._write_file(
                self._tags_dir / f"{func.name}.json",
                f'{{"values":["{self.ns}:{func.name}"]}}',
                f"{func.name}.json",
            )


def build_datapack(options: Options, manager: BCManager) -> list[CmdFunc]:
    """Convert the manager's bytecode to commands and write the datapack.

    Statistics on the manager are updated; in debug mode the command listing
    is written to the working directory. Files are only written when file
    output is enabled. Returns the converted functions.
    """
    cmds = BCConverter(options).convert(manager.functions())
    manager.stats.cmd_count += sum(len(func.cmd_list) for func in cmds)
    manager.stats.cmd_function_count = len(cmds)
    if options.debug_mode:
        Path(COMMANDS_DEBUG_FILE).write_text(format_commands(cmds), encoding="utf-8")
    if options.file_output:
        writer = DatapackWriter(options)
        writer.prepare()
        writer.write(cmds)
    return cmds