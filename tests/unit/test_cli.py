"""
Тесты для командной строки (src.cli)

Проверяет:
1. Sub-commands to-roman / to-number / validate / calc
2. JSON вывод через pydantic модели
3. Коды возврата и сообщения об ошибках
"""

import io
import json

import pytest

from src.cli import CliConfig, build_parser, main
from src.cli.main import EXIT_ERROR, EXIT_INVALID, EXIT_OK, parse_operand


def run(argv: list) -> tuple:
    """Запуск main с перехватом stdout."""
    out = io.StringIO()
    code = main(argv, out=out)
    return code, out.getvalue()


class TestToRomanCommand:
    """to-roman"""

    def test_plain_output(self) -> None:
        """Текстовый вывод"""
        assert run(["to-roman", "1982"]) == (EXIT_OK, "MCMLXXXII\n")

    def test_json_output(self) -> None:
        """JSON вывод"""
        code, output = run(["--json", "to-roman", "3999"])
        assert code == EXIT_OK
        assert json.loads(output) == {"number": 3999, "roman": "MMMCMXCIX"}

    @pytest.mark.parametrize("number", ["0", "-1", "4000"])
    def test_out_of_range(self, number: str, capsys: pytest.CaptureFixture) -> None:
        """Вне диапазона — код 2 и сообщение в stderr"""
        code, output = run(["to-roman", number])
        assert code == EXIT_ERROR
        assert output == ""
        assert capsys.readouterr().err.startswith("Error: Numbers")


class TestToNumberCommand:
    """to-number"""

    def test_plain_output(self) -> None:
        """Текстовый вывод"""
        assert run(["to-number", "IX"]) == (EXIT_OK, "9\n")

    def test_json_output(self) -> None:
        """JSON вывод с отступом"""
        code, output = run(["--json", "--indent", "2", "to-number", "MCMLXXXII"])
        assert code == EXIT_OK
        assert "\n  " in output
        assert json.loads(output) == {"number": 1982, "roman": "MCMLXXXII"}

    def test_invalid_numeral(self, capsys: pytest.CaptureFixture) -> None:
        """Невалидная запись — код 2"""
        code, _ = run(["to-number", "IIII"])
        assert code == EXIT_ERROR
        assert "not a valid Roman numeral" in capsys.readouterr().err


class TestValidateCommand:
    """validate"""

    def test_all_valid(self) -> None:
        """Все валидны — код 0"""
        code, output = run(["validate", "IV", "XL"])
        assert code == EXIT_OK
        assert output == "IV\tvalid\nXL\tvalid\n"

    def test_some_invalid(self) -> None:
        """Есть невалидные — код 1"""
        code, output = run(["validate", "IV", "IC"])
        assert code == EXIT_INVALID
        assert output.splitlines() == ["IV\tvalid", "IC\tinvalid"]

    def test_json_lines(self) -> None:
        """JSON — одна строка на вход"""
        code, output = run(["--json", "validate", "VX"])
        assert code == EXIT_INVALID
        assert json.loads(output) == {"value": "VX", "valid": False}


class TestCalcCommand:
    """calc"""

    @pytest.mark.parametrize(
        "left, operator, right, expected",
        [
            ("MCMLXXXII", "+", "XL", "MMXXII"),
            ("IX", "-", "I", "VIII"),
            ("12", "*", "12", "CXLIV"),
            ("100", "//", "7", "XIV"),
            ("C", "%", "VII", "II"),
        ],
    )
    def test_operations(self, left: str, operator: str, right: str, expected: str) -> None:
        """Операции между int и записями"""
        assert run(["calc", left, operator, right]) == (EXIT_OK, f"{expected}\n")

    @pytest.mark.parametrize(
        "left, operator, right",
        [("2000", "*", "2"), ("1", "-", "2"), ("1", "//", "2"), ("9", "%", "9")],
    )
    def test_out_of_range_result(self, left: str, operator: str, right: str) -> None:
        """Результат вне диапазона — код 2"""
        code, output = run(["calc", left, operator, right])
        assert code == EXIT_ERROR
        assert output == ""

    @pytest.mark.parametrize("operand", ["\u00b2", "\u2460", "12a"])
    def test_non_decimal_operand(self, operand: str, capsys: pytest.CaptureFixture) -> None:
        """Не-десятичные цифры не являются числом — код 2 и сообщение"""
        code, output = run(["calc", operand, "+", "I"])
        assert code == EXIT_ERROR
        assert output == ""
        assert "not a valid Roman numeral" in capsys.readouterr().err

    def test_unknown_operator(self) -> None:
        """Неизвестный оператор отклоняется argparse"""
        with pytest.raises(SystemExit):
            run(["calc", "I", "^", "I"])


class TestParser:
    """Разбор аргументов"""

    def test_command_required(self) -> None:
        """Без sub-command — ошибка"""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_parse_operand(self) -> None:
        """Операнд — int или запись"""
        assert parse_operand("14").roman == "XIV"
        assert parse_operand("XIV").number == 14

    def test_config_defaults(self) -> None:
        """CliConfig по умолчанию — текстовый вывод"""
        config = CliConfig()
        assert config.json_output is False
        assert config.indent is None
