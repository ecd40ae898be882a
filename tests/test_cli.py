from closion.cli import main


def test_number_expression(capsys):
    assert main(["12"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "Result: 12"
    assert lines[0].strip() == "Statement"
    assert "Number: 12" in lines[2]


def test_default_expression(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[-1] == "Result: -141"
    assert "Parenthesis Expression" in out


def test_tree_indentation_grows(capsys):
    main(["(3)"])
    lines = capsys.readouterr().out.splitlines()[:-1]
    indents = [len(line) - len(line.lstrip(" ")) for line in lines]
    assert indents == sorted(indents)
    assert indents[0] < indents[-1]


def test_empty_expression(capsys):
    assert main([""]) == 0
    assert capsys.readouterr().out.strip() == "Result: None"


def test_parse_error(capsys):
    assert main(["(1"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err


def test_division_by_zero(capsys):
    assert main(["5 / 0"]) == 1
    assert "divide by zero" in capsys.readouterr().err