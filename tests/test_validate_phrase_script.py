"""
Tests for the validate_phrase CLI script
"""

from scripts.validate_phrase import EXIT_ERROR, EXIT_INVALID, EXIT_VALID, main
from src.services.common.service_factory import ServiceFactory
from src.services.phrase_validation import Rule, RuleEvaluator


class TestValidatePhraseScript:
    """Test command-line validation"""

    def test_valid_phrase(self, capsys):
        assert main(["hello world"]) == EXIT_VALID

        output = capsys.readouterr().out
        assert "Overall: VALID" in output

    def test_invalid_phrase(self, capsys):
        assert main(["hello world", "this is the Worst idea"]) == EXIT_INVALID

        output = capsys.readouterr().out
        assert "Rule 'No sensitive language' failed: worst" in output

    def test_evaluation_error(self, capsys):
        def explode(phrase):
            raise RuntimeError("boom")

        ServiceFactory._instances["phrase_evaluator"] = RuleEvaluator(
            [Rule(name="Exploding rule", predicate=explode)]
        )

        assert main(["hello"]) == EXIT_ERROR
        assert "Exploding rule" in capsys.readouterr().out

    def test_interactive_mode(self, capsys, monkeypatch):
        answers = iter(["go go go", ""])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        assert main([]) == EXIT_VALID

        output = capsys.readouterr().out
        assert "No more than 2 repeating words" in output
        assert "Overall: INVALID" in output
        assert "Goodbye" in output
