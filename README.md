# unixkit

A set of small command-line tools modelled on familiar Unix utilities, along
with a few text helpers and short examples of classic design patterns.

## Installation

```
pip install .
```

To run the test suite, install the test extra and call pytest:

```
pip install ".[test]"
pytest
```

## Commands

### `unixkit-sort`: sort the lines of a file

```
unixkit-sort [-k N] [-n] [-r] [-u] FILE
```

* `-k N`: sort by column N; columns are separated by single spaces, and lines
  without that column come first
* `-n`: sort by numeric value; lines that are not numbers come first, sorted as
  text, followed by the numbers in ascending order
* `-r`: reverse the order
* `-u`: drop repeated lines

The options are applied one after another in the order column, numeric,
unique, reverse. A trailing empty line in the file is ignored.

### `unixkit-grep`: filter the lines of a file

```
unixkit-grep [-A N] [-B N] [-C N] [-c] [-i] [-v] [-F] [-n] PATTERN FILE
```

* `-A N` / `-B N` / `-C N`: print N lines after, before, or around each match;
  groups are separated by `--`
* `-c`: print only the number of matching lines
* `-i`: ignore case
* `-v`: print the lines that do not match
* `-F`: the pattern is a fixed string and must equal the whole line
* `-n`: prefix each match with its line number

The pattern is a Python regular expression; an invalid one is reported on
standard error with a non-zero exit status.

### `unixkit-cut`: pick fields from standard input

```
printf 'a\tb\tc\n' | unixkit-cut -f 1,3
```

* `-f LIST`: the fields to print, as comma-separated numbers (required)
* `-d DELIM`: field delimiter, a tab by default
* `-s`: print only lines that contain the delimiter

A line without the delimiter is printed unchanged unless `-s` is given.

### `unixkit-shell`: a small interactive shell

It has the built-in commands `cd`, `pwd`, `echo`, `kill`, and `ps`, runs any
other command as an external program, and joins commands with `|` pipes.
Type `\exit` (or send end of input) to leave.

### `unixkit-wget`: mirror a web site

```
unixkit-wget https://www.example.com
```

This starts at the root of the given site and follows, depth first, every
link found in `href`, `src` and `style` attributes and in stylesheet `url(...)`
references whose address contains the site's host. Each page is saved under a
directory named after the host; pages without an extension get `.html`, and
links inside saved HTML pages are rewritten so that the copy can be browsed
offline.

### `unixkit-ntptime`: print the exact time

```
unixkit-ntptime [SERVER] [--timeout SECONDS]
```

Asks an NTP server (`pool.ntp.org` by default) for the current time and prints
it in local time. On failure it writes the error to standard error and exits
with status 1.

### `unixkit-anagrams`: group words into anagram sets

Prints the anagram sets found in a built-in sample list of words. Run as
`python -m unixkit.anagrams WORD...` it groups the given words instead.

### Design pattern demos

`unixkit-patterns-creational`, `unixkit-patterns-structural` and
`unixkit-patterns-behavioral` each run a short demonstration of the builder,
factory method, facade, visitor, command, chain of responsibility, strategy,
and state patterns.

## Library use

```python
from unixkit.unpack import unpack
from unixkit.anagrams import find_anagrams
from unixkit.sort import SortOptions, sort_lines

unpack("a4bc2d5e")                 # "aaaabccddddde"
find_anagrams(["пятак", "пятка", "тяпка"])
# {"пятак": ["пятак", "пятка", "тяпка"]}

sort_lines(["b", "a", "c"], SortOptions(reverse=True))   # ["c", "b", "a"]
```

`unpack` raises `UnpackError` when it is given a string that starts with a
digit, such as `"45"`.

Other modules you can import:

* `unixkit.grep`: `grep_lines`, `GrepOptions`, `read_lines`
* `unixkit.cut`: `cut_lines`, `cut_line`, `parse_fields`, `CutOptions`
* `unixkit.shell`: `echo`, `pwd`, `cd`, `kill`, `ps`, `fork_exec`, `execute`,
  `handle_pipes`
* `unixkit.ntptime`: `get_time(server, timeout)` returns a UTC `datetime` and
  raises `NTPError` on failure
* `unixkit.orchan`: `or_channel(*events)` returns a `threading.Event` that is
  set as soon as any of the given events is set (`None` for no events), and
  `signal_after(delay)` returns an event that is set after `delay` seconds
* `unixkit.webpaths`: helpers that map URLs to local file paths
* `unixkit.extractor` and `unixkit.crawler`: the parts that make up the site
  mirror
* `unixkit.patterns.creational`, `unixkit.patterns.structural`,
  `unixkit.patterns.behavioral`: the pattern classes used by the demos

## Limitations

* `unixkit-sort` has only `-k`, `-n`, `-r` and `-u`; there is no month,
  human-readable-size, blank-ignoring or "check if sorted" mode.
* `unixkit-cut` takes single field numbers only; ranges such as `2-4` are not
  understood.
* `unixkit-shell` splits commands on whitespace only: it has no quoting,
  redirection, variables or background jobs, and each stage of a pipeline runs
  to completion before the next one starts. `kill` always sends `SIGKILL`.
* `unixkit-wget` does not consult `robots.txt`, does not limit depth, and skips
  `.dmg` files.
* There is no telnet client and no HTTP server in this package.