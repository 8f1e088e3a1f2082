# mcdatapack

`mcdatapack` is the back end of a compiler for a small C-like language whose
programs run inside Minecraft. It takes functions made of bytecode
instructions and lowers them to raw Minecraft commands. Every variable is
kept on a scoreboard objective. The result is written out as a datapack that
is ready to load.

## What is in the package

- `mcdatapack.types` holds the language's types: `BaseType`, `Type` and
  `parse_type`, which reads names such as `"int"` or `"const str"`. It also
  holds the small records built on them: `Var`, `Param` and `Return`.
- `mcdatapack.loc` holds `Loc`, a file/line/column position.
  `Loc.describe()` renders it as `file:line:col`, with `??` for an unknown
  line.
- `mcdatapack.text` holds string helpers:
  - `is_alnum_us` tests for an ASCII letter, digit or underscore.
  - `thousands_sep` formats counts.
  - `replace_inserted_values` substitutes `{{name}}` placeholders with
    constant values.
  - `reference_path` resolves an include relative to the file that includes
    it.
- `mcdatapack.errors` handles diagnostics:
  - `CompileError` is the exception raised for errors.
  - `ErrorLevel` and `WarnSetting` decide which notes and warnings are shown,
    through `should_display`.
  - `format_message` gives the plain text of a diagnostic.
  - `report` writes a diagnostic to a stream, in colour when the stream is a
    terminal, and raises `CompileError` for errors.
  - `color_text` wraps text in ANSI codes.
- `mcdatapack.instr` holds the bytecode:
  - `InstrType` and `Instr` describe single instructions.
  - `BCFunc` is a named list of instructions.
  - `format_instructions` gives a readable listing.
- `mcdatapack.context` holds `Context` and `ContextStack`: scoped variables
  and constant values.
- `mcdatapack.tmpvar` holds `TmpVarManager`, the pool of temporary
  variables named `0tmp0`, `0tmp1` and so on.
- `mcdatapack.bcgen` holds `BCManager`, which collects generated functions:
  - It keeps a function stack and a write stack. Any `False` entry on the
    write stack turns writing off.
  - It counts instructions, stack operations and calls in a `Statistics`.
  - `control_flow_check` continues generation in a new function that is
    called only when a condition holds.
  - `finalize` adds the initialisation of `0ret`, `0retv` and the `int` and
    `bool` globals to the start of the `load` function. It creates `load` if
    there is none.
- `mcdatapack.tokens` holds `TokenType` and `Token`. `classify_word` and
  `classify_punct` classify keywords and symbols, and `token_table` prints a
  debug table of tokens.
- `mcdatapack.bcconvert` holds `BCConverter`, which turns `BCFunc`s into
  `CmdFunc`s full of Minecraft commands. `format_commands` lists them.
- `mcdatapack.options` holds `Options`, the compiler settings. Their defaults
  are:
  - namespace `dp`
  - output folder `out_datapack`
  - scoreboard `mclang`
  - version `latest`
  - warnings `major`
- `mcdatapack.cli` reads the settings from command-line style arguments:
  - `parse_args` reads the arguments into an `Options`.
  - `help_text` gives the usage page.
- `mcdatapack.stats` holds `Statistics` and `format_statistics`.
- `mcdatapack.datapack` writes the datapack:
  - `pack_format` maps a Minecraft version to its pack format.
  - `DatapackWriter` writes `pack.mcmeta`, one `.mcfunction` file per
    function, and the `load`/`tick` function tags.
  - `build_datapack` converts a `BCManager`'s bytecode and writes the pack.

## Examples

```python
from mcdatapack.text import replace_inserted_values, thousands_sep
from mcdatapack.datapack import pack_format

replace_inserted_values("/tp @a {{x}} 64 {{z}}", {"x": "10", "z": "-3"})
# '/tp @a 10 64 -3'

thousands_sep(1234567, ",")
# '1,234,567'

pack_format("1.18.2")
# 9
```

The following builds a small datapack from bytecode:

```python
from mcdatapack.bcgen import BCManager
from mcdatapack.datapack import build_datapack
from mcdatapack.instr import Instr, InstrType
from mcdatapack.options import Options

manager = BCManager()
manager.add_func("tick")
manager.write(Instr(InstrType.ADDI, "counter", "1"))
manager.pop_func()
manager.finalize()

options = Options(output_folder="out_datapack")
cmds = build_datapack(options, manager)
```

`build_datapack` writes to `out_datapack`:

- `tick.mcfunction` and `load.mcfunction` under `data/dp/functions`
- their tags under `data/minecraft/tags/functions`

It also updates `manager.stats`. With `debug_mode` set, it writes the command
listing to `mcl_cmds.debug` in the working directory. With `file_output`
unset, it writes no files and only returns the converted functions.

`parse_args` reads the same switches a compiler's command line would:

```python
from mcdatapack.cli import parse_args

options = parse_args(["game.mcl", "-n", "mygame", "--scoreboard", "vars", "-W", "all"])
```

- `-h` or `--help` prints the usage page and exits.
- A missing input filename raises `CompileError`, and so does a malformed
  switch.
- Unknown switches are ignored.

Supported versions for `pack_format` are 1.17, 1.17.1, 1.18, 1.18.1, 1.18.2,
1.19 and `latest`. Any other version raises `CompileError`.

## Output folder safety

`DatapackWriter.prepare` deletes the output folder before writing. It does so
only when the folder is empty or already holds a `pack.mcmeta`. A non-empty
folder that is not a datapack is left alone, and `CompileError` is raised.
Choose the output folder with care all the same.

## What the package does not do

The package does not read source programs. It has:

- no preprocessor
- no lexer that turns source text into tokens
- no parser
- nothing that generates bytecode from a syntax tree

Bytecode must be written into a `BCManager` by the calling code.
Accordingly, there is no command that compiles a source file. `parse_args`
produces settings, but nothing in the package runs a whole compile from them.

## Tests

The test suite uses pytest and is declared in the `test` extra:

```
pip install -e .[test]
pytest
```