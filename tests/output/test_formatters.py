"""Tests for format_result dispatch and OutputSettings."""

import json

from esuctl.output.formatters import OutputSettings, format_result
from esuctl.services.result import ServiceError, ServiceResult


def _enumerated() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="enumerate",
        data={"k": 2, "count": 2, "truncated": False, "subgraphs": [[1, 2], [2, 3]]},
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode(self) -> None:
        output = format_result(_enumerated(), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["subgraphs"] == [[1, 2], [2, 3]]

    def test_json_mode_error(self) -> None:
        result = ServiceResult(
            ok=False, op="enumerate", error=ServiceError(code="INVALID_ARGUMENT", message="bad k")
        )
        data = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert data["error"]["code"] == "INVALID_ARGUMENT"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_enumerated(), settings=settings))["ok"] is True

    def test_quiet_mode(self) -> None:
        output = format_result(_enumerated(), settings=OutputSettings(quiet=True))
        assert output == "1 2\n2 3"

    def test_default_is_rich(self) -> None:
        output = format_result(_enumerated())
        assert "Vertices" in output
        assert "2 connected subgraphs of size 2" in output
