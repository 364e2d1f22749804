from __future__ import annotations

import pytest

from ccds.prompts import InputRequiredError, PromptError

from conftest import scripted


@pytest.mark.parametrize("answer, expected", [("y\n", True), ("n\n", False), ("\n", False)])
def test_confirm(answer: str, expected: bool) -> None:
    prompter, _out = scripted(answer)
    assert prompter.confirm("Continue? [y/N]: ") is expected


def test_confirm_reprompts_on_other_input() -> None:
    prompter, out = scripted("maybe\nyes\ny\n")
    assert prompter.confirm("Continue? [y/N]: ") is True
    assert out.getvalue().count("Please answer [y/N]: ") == 2


def test_ask_strips_input() -> None:
    prompter, out = scripted("  Ada Lovelace \n")
    assert prompter.ask("Author: ") == "Ada Lovelace"
    assert out.getvalue() == "Author: "


def test_ask_accepts_empty_answer() -> None:
    prompter, _out = scripted("\n")
    assert prompter.ask("Author: ") == ""


def test_choose_silently_reprompts_on_invalid_input() -> None:
    prompter, out = scripted("abc\n0\n4\n2\n")
    assert prompter.choose("Select your license: ", ["MIT", "BSD-3-Clause", "None"]) == "BSD-3-Clause"
    text = out.getvalue()
    assert text.startswith("Select your license: \n1 - MIT\n2 - BSD-3-Clause\n3 - None\n")
    assert text.count("Choose 1, 2, 3: ") == 4
    assert "invalid" not in text.lower()


def test_choose_without_default_rejects_empty() -> None:
    prompter, out = scripted("\n3\n")
    assert prompter.choose("Pick: ", ["a", "b", "c"]) == "c"
    assert out.getvalue().count("Choose 1, 2, 3: ") == 2


def test_choose_default_on_empty() -> None:
    prompter, out = scripted("\n")
    assert prompter.choose("Select your primary language: ", ["python", "R"], default=0) == "python"
    assert "Choose 1, 2 [1]: " in out.getvalue()


def test_non_interactive_fails_instead_of_reading() -> None:
    prompter, _out = scripted("y\n", interactive=False)
    with pytest.raises(InputRequiredError, match="non-interactive"):
        prompter.ask("Author: ")


def test_end_of_input_without_default_is_an_error() -> None:
    prompter, _out = scripted("x\n")
    with pytest.raises(PromptError, match="end of input"):
        prompter.choose("Pick: ", ["a", "b"])


def test_end_of_input_declines_confirm() -> None:
    prompter, _out = scripted("")
    assert prompter.confirm("Continue? [y/N]: ") is False


def test_end_of_input_reads_as_empty_answer() -> None:
    prompter, _out = scripted("")
    assert prompter.ask("Author: ") == ""


def test_end_of_input_selects_default() -> None:
    prompter, _out = scripted("3\n")
    assert prompter.choose("Select your primary language: ", ["python", "R"], default=0) == "python"
