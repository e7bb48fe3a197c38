import pytest

from minieval.cli import main


def test_main_without_arguments_succeeds():
    assert main([]) == 0


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as info:
        main(["--unknown"])
    assert info.value.code == 2


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "minieval" in capsys.readouterr().out