import io

from minicc.cli import HEADERS, main, render_table, token_rows
from minicc.scanner import scan_tokens
from minicc.token import TokenType


def test_token_rows_columns():
    rows = token_rows(scan_tokens("int x;"))
    assert rows == [
        (str(int(TokenType.INT)), "INT", "int", "1"),
        (str(int(TokenType.IDENTIFIER)), "IDENTIFIER", "x", "1"),
        (str(int(TokenType.SEMICOLON)), "SEMICOLON", ";", "1"),
        (str(int(TokenType.EOF_TOKEN)), "EOF_TOKEN", "", "1"),
    ]


def test_token_rows_empty():
    assert token_rows([]) == []


def test_render_table_shape():
    tokens = scan_tokens("int x = 10;\nreturn x;")
    lines = render_table(tokens).splitlines()
    assert len(lines) == len(tokens) + 2
    assert len({len(line) for line in lines}) == 1
    assert [cell.strip() for cell in lines[0].split(" | ")] == list(HEADERS)


def test_render_table_cells_match_rows():
    tokens = scan_tokens("a <= 3.5")
    lines = render_table(tokens).splitlines()[2:]
    cells = [tuple(cell.strip() for cell in line.split(" | ")) for line in lines]
    assert cells == token_rows(tokens)


def test_main_prints_table(tmp_path, capsys):
    path = tmp_path / "prog.c"
    path.write_text("int main() { return 0; }", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.rstrip("\n") == render_table(scan_tokens(path.read_text(encoding="utf-8")))


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x;"))
    assert main([]) == 0
    assert "IDENTIFIER" in capsys.readouterr().out


def test_main_parse_reports_errors(tmp_path, capsys):
    path = tmp_path / "bad.c"
    path.write_text("int x", encoding="utf-8")
    assert main([str(path), "--parse"]) == 1
    assert "变量声明缺少分号" in capsys.readouterr().err


def test_main_parse_accepts_valid(tmp_path, capsys):
    path = tmp_path / "ok.c"
    path.write_text("int x = 1;", encoding="utf-8")
    assert main([str(path), "--parse"]) == 0
    assert capsys.readouterr().err == ""


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.c")]) == 1
    assert capsys.readouterr().err.startswith("minicc:")