import pytest

from godsfun.app import main


def test_main_prints_greeting(capsys):
    status = main([])
    assert capsys.readouterr().out == "Hello World!\n"
    assert status == 0


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2