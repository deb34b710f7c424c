from usha.core.models import SearchResult
from usha.presentation.renderers import format_results, render_results_table, results_to_json


def test_counts_end_in_one_column():
    results = [SearchResult("git status", 4), SearchResult("ls", 12)]

    lines = format_results(results).split("\n")

    assert lines == ["git status  4", "ls         12"]


def test_timestamps_follow_counts():
    results = [
        SearchResult("make", 3, "2024-05-01 09:00:00"),
        SearchResult("make test", 10, "2024-04-30 18:30:00"),
    ]

    assert format_results(results).split("\n") == [
        "make        3  2024-05-01 09:00:00",
        "make test  10  2024-04-30 18:30:00",
    ]


def test_command_only_lines():
    results = [SearchResult("git push"), SearchResult("ls")]

    assert format_results(results) == "git push\nls"


def test_empty_results_render_nothing():
    assert format_results([]) == ""


def test_json_shape_omits_absent_fields():
    results = [SearchResult("ls", 2), SearchResult("pwd"), SearchResult("make", 1, "2024-01-01 00:00:00")]

    assert results_to_json(results) == [
        {"cmd": "ls", "count": 2},
        {"cmd": "pwd"},
        {"cmd": "make", "count": 1, "timestamp": "2024-01-01 00:00:00"},
    ]


def test_table_columns_follow_populated_fields():
    assert len(render_results_table([SearchResult("ls")]).columns) == 1
    assert len(render_results_table([SearchResult("ls", 1)]).columns) == 2
    assert len(render_results_table([SearchResult("ls", 1, "2024-01-01 00:00:00")]).columns) == 3
