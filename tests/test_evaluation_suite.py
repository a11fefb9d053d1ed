from evaluation.harness import run_evaluation_suite, run_smoke_checks


def test_evaluation_scenarios_pass():
    results = run_evaluation_suite()
    assert results, "Expected evaluation scenarios to run"
    for result in results:
        assert result["passed"], f"Scenario {result['scenario']} failed checks: {result['checks']}"
        assert result["quick_items"]


def test_smoke_checks_report_each_scenario():
    lines = run_smoke_checks()
    assert lines and all(line.endswith("passed") for line in lines)
