# minicc

A small front end for a subset of C. It has two stages:

- **Scanning.** Source text becomes a list of tokens: C99 keywords, identifiers, numbers, operators and punctuation. Each token carries its line number, and the list always ends with an `EOF_TOKEN`. Comments and whitespace are skipped. Unexpected characters and unterminated `/* ... */` comments are reported as warnings through the `minicc.scanner` logger, and scanning carries on.
- **Syntax checking.** A recursive-descent parser checks the token list. It accepts `int`, `float` and `char` variable declarations (with an optional initialiser), function declarations with an empty parameter list, blocks, `if`/`else`, `return` and expression statements. Expressions cover assignment, `==`/`!=`, `<`/`<=`/`>`/`>=`, `+`/`-`, `*`/`/`, unary `!`/`-`, numbers, identifiers and parentheses. After each error the parser skips ahead to the next `;` or statement keyword and goes on checking the rest of the input.

## Installation

```
pip install .
```

To also install the test tools:

```
pip install .[test]
```

## Command line

```
minicc program.c
```

This prints a table with one row per token. The columns are:

- the numeric token type
- the type name
- the text of the token
- the line number

When no file is given, or the path is `-`, the source is read from standard input:

```
echo "int x = 1;" | minicc
```

Add `--parse` to check the syntax as well:

```
minicc --parse program.c
```

Each syntax error is written to standard error, and the command exits with status 1 if there were any. It also exits with status 1 when the file cannot be read.

## Library use

```python
from minicc.scanner import scan_tokens
from minicc.parser import parse
from minicc.token import print_tokens

tokens = scan_tokens("int main() { return 0; }")
print_tokens(tokens)
issues = parse(tokens)   # an empty list means the input was accepted
for issue in issues:
    print(issue)
```

`parse` returns a list of `minicc.parser.SyntaxIssue` records. Each has a `line`, a `message` and the `lexeme` of the token where the problem was found.

The classes behind these functions are also available:

- `minicc.scanner.Scanner`: `Scanner(source).scan_tokens()` returns the token list.
- `minicc.parser.Parser`: `Parser(tokens).parse()` returns `True` when no error was found, and leaves the problems in its `errors` attribute. The token list must end with an `EOF_TOKEN`, or `ValueError` is raised.
- `minicc.token.Token`: a frozen record of `type`, `value` and `line`.
- `minicc.token.TokenType`: an integer enumeration of every token kind.

For working with tokens and tables:

- `minicc.token.token_type_name` returns the name of a token type, or `"UNKNOWN"`.
- `minicc.token.format_token` gives a one-line description of a token; `print_token` and `print_tokens` write such lines to standard output.
- `minicc.cli.token_rows` produces the table rows the command prints.
- `minicc.cli.render_table` produces the whole table as text.

## What it does not do

minicc only scans and checks syntax. It builds no syntax tree, does no type checking and generates no code. Function parameters, loops (`while`, `for`), string and character literals and most other C constructs are not parsed. There is no interactive editor view: the token table is printed once for the given input.