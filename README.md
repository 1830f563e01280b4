# ulister

`ulister` lists the contents of directories. It can print names in columns,
as a comma-separated stream, one per line, or in a long format. It can also
colour names by type, sort them in several ways and list directories
recursively.

## Installation

```
pip install .
```

## Usage

```
ulister [-ACRFGSTUacfhlmprtu1@] [file ...]
```

If no operands are given, the current directory is listed. Files named on
the command line are listed first and directories after them. A directory
gets a `name:` heading when more than one directory is listed, or when files
were listed before it.

An unknown option letter stops the program. It prints an "illegal option"
message with a usage line and exits with status 1. An operand that does not
exist, or a directory that cannot be read, is reported on standard error.
The listing then goes on, and the exit status is 1.

When standard output is not a terminal, the column layouts print one name
per line. `-C` keeps the columns in that case and assumes a width of 79.

### Options

| Option | Effect |
|--------|--------|
| `-a` | include entries whose names start with `.` |
| `-A` | like `-a`, but leave out `.` and `..` |
| `-R` | list subdirectories recursively |
| `-l` | long format: mode, links, owner, group, size, time, name, and `-> target` for links |
| `-h` | with `-l`, show sizes with a B, K, M, G or T suffix |
| `-T` | with `-l`, show the full date and time including seconds and year |
| `-@` | with `-l`, show the first extended attribute name and its size |
| `-1` | one entry per line |
| `-C` | columns, also when the output is not a terminal |
| `-m` | names separated by commas |
| `-G` | colour names by file type |
| `-F` | append `/`, `*`, `@`, `=` or `\|` to show the type |
| `-p` | append `/` to directories |
| `-S` | sort by size, largest first |
| `-t` | sort by modification time, newest first |
| `-u` | use the access time for `-t` and `-l` |
| `-c` | use the status change time for `-t` and `-l` |
| `-U` | use the creation time for `-l`, where the system records it |
| `-r` | reverse the sort order |
| `-f` | do not sort, include every entry, and do not recurse |

`-l`, `-C` and `-1` override each other, and the last one given wins. The
same holds for `-u` and `-c`. A `--` argument ends the options, and every
argument after it is taken as an operand.

### Examples

```
ulister -la
ulister -lhS /var/log
ulister -RG src
ulister -m docs tests
```

## Library use

The same listing can be made from Python code:

```python
import sys
from ulister.options import parse_args
from ulister.listing import Lister

options, operands = parse_args(["-l"])
lister = Lister(options, sys.stdout, sys.stderr)
lister.list_operands(operands or ["."])
print(lister.status)
```

`ulister.listing.main(argv=None)` runs the whole command and returns the exit
status. The modules `ulister.layout`, `ulister.longformat`,
`ulister.sorting`, `ulister.filetype` and `ulister.sizes` hold the separate
pieces. These are the column and stream layouts, the long format, the sort
order, the file kinds and permission strings, and the size fields.

## Limitations

- The long format marks extended attributes with `@`. It does not mark
  access control lists.
- Extended attributes are read only where the platform supports them.
  Elsewhere no `@` mark is shown.
- Where no creation time is recorded, `-U` shows the modification time.