from __future__ import annotations

import pytest

from cleanos.services.formatting import format_bytes, format_context_length, format_cost, relative_bar


def test_format_bytes() -> None:
    assert format_bytes(0) == "0 B"
    assert format_bytes(-3) == "0 B"
    assert format_bytes(512) == "512 B"
    assert format_bytes(1536) == "1.5 KB"
    assert format_bytes(5 * 1024**3) == "5.0 GB"


def test_relative_bar() -> None:
    assert relative_bar(50, 100, width=10) == "█████░░░░░"
    assert relative_bar(500, 100, width=4) == "████"
    assert relative_bar(1, 0) == ""


@pytest.mark.parametrize(
    ("tokens", "expected"),
    [(512, "512"), (8192, "8K"), (128_000, "128K"), (200_500, "201K"), (1_048_576, "1.0M")],
)
def test_format_context_length(tokens: int, expected: str) -> None:
    assert format_context_length(tokens) == expected


@pytest.mark.parametrize(
    ("cost", "expected"),
    [(None, "-"), (0.0, "free"), (0.005, "$0.005"), (0.00015, "$0.00015"), (1.5, "$1.5")],
)
def test_format_cost(cost: float | None, expected: str) -> None:
    assert format_cost(cost) == expected
