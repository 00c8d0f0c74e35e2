from pixpaint.canvas import DEFAULT_SAVE_NAME
from pixpaint.cli import help_text, main


def test_help_text_mentions_default_save_name():
    text = help_text()
    assert DEFAULT_SAVE_NAME in text
    assert text.endswith("\n")


def test_help_text_describes_the_three_buttons():
    text = help_text()
    assert "pencil" in text
    assert "eraser" in text
    assert text.count("\n") == 3


def test_help_flag_prints_help(capsys):
    assert main(["-h"]) == 1
    assert capsys.readouterr().out == help_text()


def test_help_flag_ignores_further_arguments(capsys):
    assert main(["-h", "picture.png"]) == 1
    assert capsys.readouterr().out == help_text()