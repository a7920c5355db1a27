"""
Тесты для demo entry point

Проверяет:
1. run(): отчёт по sinc(x) на [0.001, 2] близок к эталону 1.60441
2. main(): текстовый и JSON вывод
3. Ошибки контракта: run() пробрасывает, main() сообщает через usage
"""

import json

import pytest

from numeris.core.errors import DivisionByZero, InvalidStepCount
from numeris.core.math.quadrature import QuadratureRule
from numeris.core.math.sequence import SpacingMode
from numeris.demo import (
    DEFAULT_STEPS,
    REFERENCE_SINC_INTEGRAL,
    QuadratureReport,
    build_parser,
    main,
    run,
)


class TestRun:
    """Тесты run()"""

    def test_default_report(self) -> None:
        report = run()

        assert isinstance(report, QuadratureReport)
        assert report.rule == "simpsons"
        assert report.spacing == "additive"
        assert report.steps == DEFAULT_STEPS
        assert report.reference == REFERENCE_SINC_INTEGRAL
        assert report.value == pytest.approx(REFERENCE_SINC_INTEGRAL, abs=1e-3)
        assert 0.0 <= report.relative_error < 1e-3

    def test_percentage_matches_relative(self) -> None:
        report = run(steps=1000)
        assert report.percentage_error == pytest.approx(report.relative_error * 100.0, rel=1e-6)

    @pytest.mark.parametrize("rule", list(QuadratureRule))
    @pytest.mark.parametrize("spacing", list(SpacingMode))
    def test_rules_and_spacings(self, rule: QuadratureRule, spacing: SpacingMode) -> None:
        report = run(rule=rule, spacing=spacing, steps=2000)
        assert report.rule == rule.value
        assert report.spacing == spacing.value
        assert report.relative_error < 1e-3

    def test_zero_reference(self) -> None:
        with pytest.raises(DivisionByZero):
            run(steps=100, reference=0.0)

    def test_to_dict_keys(self) -> None:
        payload = run(steps=100).to_dict()
        assert set(payload) == {
            "rule",
            "spacing",
            "lower",
            "upper",
            "steps",
            "value",
            "reference",
            "relative_error",
            "percentage_error",
        }


class TestMain:
    """Тесты main()"""

    def test_text_output(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["--steps", "1000"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("Integral from 0.001 to 2.0 of sinc(x): ")
        assert lines[1].startswith("Relative error: ")
        assert lines[2].startswith("Percentage error: ")
        assert lines[2].endswith("%")

    def test_json_output(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["--json", "--rule", "trapezoidal", "--steps", "2000"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["rule"] == "trapezoidal"
        assert payload["steps"] == 2000
        assert payload["value"] == pytest.approx(REFERENCE_SINC_INTEGRAL, abs=1e-3)

    def test_custom_bounds_and_reference(self, capsys: pytest.CaptureFixture) -> None:
        main(["--json", "--lower", "1.0", "--upper", "2.0", "--steps", "100", "--reference", "0.6593299"])

        payload = json.loads(capsys.readouterr().out)
        assert payload["relative_error"] < 1e-4

    @pytest.mark.parametrize(
        "argv,message",
        [
            (["--steps", "3"], "even"),
            (["--steps", "0"], "positive"),
            (["--lower", "3.0"], "Upper bound"),
            (["--lower", "0", "--steps", "100"], "valid float"),
            (["--reference", "0", "--steps", "100"], "true_val"),
        ],
    )
    def test_bad_input_reported_as_usage_error(
        self, argv: list[str], message: str, capsys: pytest.CaptureFixture
    ) -> None:
        """Ошибки вычисления → usage + exit code 2, без traceback"""
        with pytest.raises(SystemExit) as exc_info:
            main(argv)

        assert exc_info.value.code == 2
        err = capsys.readouterr().err
        assert err.startswith("usage: numeris")
        assert message in err

    def test_run_still_raises_domain_errors(self) -> None:
        with pytest.raises(InvalidStepCount):
            run(steps=3)

    def test_invalid_rule_choice(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--rule", "midpoint"])
