from pathlib import Path

import pytest
from php_qa_tools.flow import QuestionFlow, SetupAborted
from php_qa_tools.prompts import AnswerRejected, ScriptedPrompter
from php_qa_tools.questions import build_questions


def _flow(project_root: Path, prompter) -> QuestionFlow:
    return QuestionFlow(build_questions(project_root), prompter)


def test_all_defaults(project_root: Path, prompter_factory) -> None:
    prompter = prompter_factory(*[""] * 15)
    settings = _flow(project_root, prompter).run()

    assert dict(settings.all()) == {
        "buildArtifactsPath": "build/artifacts",
        "enablePhpLint": True,
        "enablePhpCsFixer": True,
        "enablePhpMessDetector": True,
        "enablePhpCodeSniffer": True,
        "enablePhpCopyPasteDetection": True,
        "enablePhpSecurityChecker": True,
        "enablePhpUnit": True,
        "phpCsFixerLevel": "all",
        "phpCodeSnifferCodingStyle": "PSR2",
        "phpSrcPath": "src",
        "phpTestsPath": "tests",
        "enablePhpUnitAutoload": True,
        "phpTestsAutoloadPath": "vendor/autoload.php",
    }
    assert prompter.rejections == []


def test_declining_continue_asks_nothing_else(project_root: Path, prompter_factory) -> None:
    prompter = prompter_factory("n")
    with pytest.raises(SetupAborted):
        _flow(project_root, prompter).run()
    assert prompter.asked == ["continue"]


def test_declining_fixer_skips_level(project_root: Path, prompter_factory) -> None:
    answers = ["", "", "n"] + [""] * 11
    prompter = prompter_factory(*answers)
    settings = _flow(project_root, prompter).run()

    assert settings.get("enablePhpCsFixer") is False
    assert "phpCsFixerLevel" not in settings
    assert "phpCsFixerLevel" not in prompter.asked


def test_invalid_level_is_asked_again(project_root: Path, prompter_factory) -> None:
    answers = ["y", "y", "y", "PSR2", "psr9", "psr1", "n", "n", "n", "n", "", "n", ""]
    prompter = prompter_factory(*answers)
    settings = _flow(project_root, prompter).run()

    assert settings.get("phpCsFixerLevel") == "psr1"
    assert prompter.rejections == [
        ("phpCsFixerLevel", "That fixer level is not supported"),
        ("phpCsFixerLevel", "That fixer level is not supported"),
    ]
    level_prompts = [prompt for key, prompt in prompter.prompts if key == "phpCsFixerLevel"]
    assert len(set(level_prompts)) == 1
    assert len(level_prompts) == 3


def test_invalid_coding_standard_is_asked_again(project_root: Path, prompter_factory) -> None:
    answers = ["y", "n", "n", "n", "y", "psr2", "Squiz", "n", "n", "", "n", ""]
    prompter = prompter_factory(*answers)
    settings = _flow(project_root, prompter).run()

    assert settings.get("phpCodeSnifferCodingStyle") == "Squiz"
    assert prompter.rejections == [("phpCodeSnifferCodingStyle", "That coding style is not supported")]


def test_missing_source_path_is_asked_again(project_root: Path, prompter_factory) -> None:
    answers = ["", "n", "n", "y", "n", "n", "n", "lib", "src", "n", ""]
    prompter = prompter_factory(*answers)
    settings = _flow(project_root, prompter).run()

    assert settings.get("phpSrcPath") == "src"
    assert prompter.rejections == [("phpSrcPath", "That path doesn't exist")]


def test_source_path_not_asked_without_source_tools(project_root: Path, prompter_factory) -> None:
    answers = ["", "y", "n", "n", "n", "n", "y", "n", ""]
    prompter = prompter_factory(*answers)
    settings = _flow(project_root, prompter).run()

    assert "phpSrcPath" not in prompter.asked
    assert settings.get("phpSrcPath") is None
    assert settings.get("enablePhpLint") is True


def test_test_runner_without_autoload(project_root: Path, prompter_factory) -> None:
    answers = ["", "n", "n", "n", "n", "n", "n", "y", "tests", "n", ""]
    prompter = prompter_factory(*answers)
    settings = _flow(project_root, prompter).run()

    assert settings.get("enablePhpUnit") is True
    assert settings.get("phpTestsPath") == "tests"
    assert settings.get("enablePhpUnitAutoload") is False
    assert "phpTestsAutoloadPath" not in settings
    assert "phpTestsAutoloadPath" not in prompter.asked


def test_test_runner_disabled_skips_sub_questions(project_root: Path, prompter_factory) -> None:
    answers = ["", "n", "n", "n", "n", "n", "n", "n", ""]
    prompter = prompter_factory(*answers)
    settings = _flow(project_root, prompter).run()

    for key in ("phpTestsPath", "enablePhpUnitAutoload", "phpTestsAutoloadPath"):
        assert key not in prompter.asked
        assert key not in settings
    assert prompter.asked[-1] == "buildArtifactsPath"


def test_unrecognised_confirmation_is_asked_again(project_root: Path, prompter_factory) -> None:
    answers = ["sure", "YES", "N", "n", "n", "n", "n", "n", "n", ""]
    prompter = prompter_factory(*answers)
    settings = _flow(project_root, prompter).run()

    assert prompter.rejections == [("continue", "Please answer yes or no")]
    assert settings.get("enablePhpLint") is False


def test_scripted_answers(project_root: Path) -> None:
    prompter = ScriptedPrompter({"enablePhpCsFixer": False, "phpCodeSnifferCodingStyle": "Zend", "enablePhpUnit": False})
    settings = _flow(project_root, prompter).run()

    assert settings.get("enablePhpCsFixer") is False
    assert settings.get("phpCodeSnifferCodingStyle") == "Zend"
    assert settings.get("phpSrcPath") == "src"
    assert settings.get("enablePhpUnit") is False


def test_scripted_rejection_does_not_loop(project_root: Path) -> None:
    prompter = ScriptedPrompter({"phpSrcPath": "missing"})
    with pytest.raises(AnswerRejected) as excinfo:
        _flow(project_root, prompter).run()
    assert excinfo.value.key == "phpSrcPath"
    assert excinfo.value.reason == "That path doesn't exist"


def test_scripted_decline_aborts(project_root: Path) -> None:
    with pytest.raises(SetupAborted):
        _flow(project_root, ScriptedPrompter({"continue": False})).run()


def test_unresolvable_path_is_asked_again(project_root: Path, prompter_factory) -> None:
    answers = ["", "n", "n", "y", "n", "n", "n", "x" * 300, "src", "n", ""]
    prompter = prompter_factory(*answers)
    settings = _flow(project_root, prompter).run()

    assert settings.get("phpSrcPath") == "src"
    assert prompter.rejections == [("phpSrcPath", "That path doesn't exist")]
